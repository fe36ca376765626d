"""Code generator exception hierarchy.

Naming helpers and context accessors never raise: they degrade to an empty
identifier, a fallback name or a no-op.  The only failures are
configuration-time ones, raised while building the acronym table.

All exceptions inherit from ``CodegenError`` to enable blanket
``except CodegenError`` handling in generator front ends.
"""

from __future__ import annotations


class CodegenError(Exception):
    """Base exception for all code generator failures."""

    __slots__ = ()


class InvalidAcronymError(CodegenError):
    """Raised when an acronym entry can never match a tokenized word.

    Attributes
    ----------
    acronym : str
        The rejected entry, as supplied.
    """

    __slots__ = ("acronym",)

    def __init__(self, acronym: str) -> None:
        super().__init__(
            f"Acronym {acronym!r} must be a non-empty ASCII alphanumeric token"
        )
        self.acronym = acronym
