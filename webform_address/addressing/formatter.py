"""Placeholder replacement for address format strings."""

import re
from typing import Mapping

_LEADING_NOISE = re.compile(r"^[-,]+")
_REPEATED_WHITESPACE = re.compile(r"\s\s+")


def replace_placeholders(format_string: str, replacements: Mapping[str, str]) -> str:
    """Replace ``%placeholder`` tokens and clean up the resulting lines.

    Empty replacements leave separators behind (``", "`` between an empty
    locality and an empty administrative area, for instance). Each line is
    stripped of leading dashes and commas and of repeated whitespace, and
    empty lines are dropped.

    Parameters
    ----------
    format_string : str
        Format with ``%name`` placeholders and ``\\n`` line breaks.
    replacements : Mapping[str, str]
        Placeholder (including the ``%``) to replacement text.

    Returns
    -------
    str
        Non-empty lines joined with ``\\n``.
    """
    if replacements:
        # Longest first so that %address_line1 never matches as %address_line
        pattern = re.compile(
            "|".join(re.escape(key) for key in sorted(replacements, key=len, reverse=True))
        )
        format_string = pattern.sub(lambda match: replacements[match.group(0)], format_string)

    lines = []
    for line in format_string.split("\n"):
        line = _LEADING_NOISE.sub("", line, count=1).strip()
        line = _REPEATED_WHITESPACE.sub(" ", line)
        if line:
            lines.append(line)
    return "\n".join(lines)
