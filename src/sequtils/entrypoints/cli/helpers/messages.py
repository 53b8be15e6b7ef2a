"""Terminal message helpers for the SEQUTILS CLI.

Messages go to stderr so stdout carries only command results and can be
piped into other tools. Emoji glyphs fall back to ASCII when the stream
cannot encode them.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on Click's stderr stream.

    The stream is looked up on every call; it may be swapped between calls
    (tests, redirected output).
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, else "[!]"."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, else "[X]"."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr.

    Example:
        ``⚠️  Chunk size 0 is not positive; emitting all input as one chunk.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  tail needs at least one input line.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
