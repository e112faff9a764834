"""Terminal message helpers for the MIXIN CLI.

User-visible status lines go to stderr so stdout stays machine-readable
(``mixin inspect --json``). Glyphs fall back to ASCII when stderr cannot
encode them.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def glyph(choices: tuple[str, str]) -> str:
    """Return the emoji of ``choices`` if stderr can encode it, else the ASCII fallback.

    Click's stderr stream is looked up on every call so redirected or
    re-encoded streams are honoured.
    """
    emoji, fallback = choices
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return emoji


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{glyph(SUCCESS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{glyph(ERROR)}  {msg}", fg="red", bold=True, err=True)
