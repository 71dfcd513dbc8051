"""Enum members that double as CLI choices.

Every member carries a stable token (``cli_name``) that is used verbatim on
the command line, in build keys, and in analytics, plus a human-directed
``help_text``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self


class CliEnum(StrEnum):
    """Base for enums whose members are selectable on the command line.

    Subclasses declare members with their token as the value and override
    :attr:`help_text`.
    """

    @property
    def cli_name(self) -> str:
        return self.value

    @property
    def help_text(self) -> str:
        """Description shown next to ``cli_name``; subclasses override it."""
        return ""

    @classmethod
    def from_cli_name(cls, token: str) -> Self:
        """Return the member whose ``cli_name`` is *token*.

        Raises ``ValueError`` listing the accepted tokens otherwise.
        """
        for member in cls:
            if member.cli_name == token:
                return member
        allowed = ", ".join(m.cli_name for m in cls)
        raise ValueError(f"Unknown {cls.__name__} {token!r} (expected one of: {allowed})")

    @classmethod
    def allowed_help(cls) -> dict[str, str]:
        """Map each ``cli_name`` to its help text, in declaration order."""
        return {m.cli_name: m.help_text for m in cls}
