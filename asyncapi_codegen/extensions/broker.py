"""Values exchanged with broker integrations through the message context."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    """Which way a message is travelling, stored under ``ContextKey.DIRECTION``."""
    PUBLICATION = "publication"
    RECEPTION = "reception"


@dataclass(slots=True)
class BrokerMessage:
    """A message as sent to or received from the broker."""

    headers: dict[str, bytes] = field(default_factory=dict)
    payload: bytes = b""

    def is_uninitialized(self) -> bool:
        return not self.headers and not self.payload
