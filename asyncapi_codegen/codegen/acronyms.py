"""Acronym table used by the identifier normalizer.

An acronym is a short token (``ID``, ``URL``) that is rendered fully
uppercase when it forms a whole word after tokenization, instead of being
title-cased.  Tables are immutable: ``extended`` returns a new table, so a
table built at import time can be shared across threads without locking.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from asyncapi_codegen.exceptions import InvalidAcronymError

log = logging.getLogger(__name__)

_ACRONYM = re.compile(r"[A-Za-z0-9]+")

# Seed entries, uppercase canonical spelling
SEED_ACRONYMS: tuple[str, ...] = (
    "ACL", "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML",
    "HTTP", "HTTPS", "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS", "RPC",
    "SLA", "SMTP", "SQL", "SSH", "TCP", "TLS", "TTL", "UDP", "UI", "UID",
    "UUID", "URI", "URL", "UTF8", "VM", "XML", "XMPP", "XSRF", "XSS",
)


def _canonical(word: str) -> str:
    if not isinstance(word, str) or not _ACRONYM.fullmatch(word):
        raise InvalidAcronymError(str(word))
    return word.upper()


class Acronyms:
    """Read-only set of acronyms with case-insensitive whole-word lookup.

    Examples
    --------
    >>> table = Acronyms(["ID"])
    >>> table.lookup("Id")
    'ID'
    >>> table.lookup("identity") is None
    True
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = SEED_ACRONYMS) -> None:
        self._words: frozenset[str] = frozenset(_canonical(w) for w in words)

    def lookup(self, word: str) -> str | None:
        """Return the canonical spelling of *word*, or ``None`` if it is not an acronym."""
        upper = word.upper()
        return upper if upper in self._words else None

    def extended(self, *words: str) -> Acronyms:
        """Return a new table holding this table's entries plus *words*.

        Raises
        ------
        InvalidAcronymError
            If one of *words* is empty or not ASCII alphanumeric.
        """
        added = {_canonical(w) for w in words} - self._words
        if added:
            log.debug("Extending acronym table with %s", sorted(added))
        return Acronyms(self._words | added)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Acronyms({len(self._words)} entries)"


DEFAULT_ACRONYMS = Acronyms()
