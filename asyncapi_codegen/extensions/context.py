"""Typed accessors over the message context.

Generated clients and broker integrations share a loosely typed context
carrier.  Values are read with a runtime type check and every helper is a
no-op when the key is missing or holds a value of another type:

    if_context_set_with(ctx, ContextKey.CORRELATION_ID, str, tracer.tag)

Any object exposing ``get(key)`` can serve as the context, plain dicts
included.  A stored ``None`` is treated as absent.  Helpers only read the
context; ``MessageContext`` is an immutable carrier for callers that need one.

All well-known keys start with ``PREFIX`` so that they do not collide with
unrelated entries placed in the same context.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Protocol, TypeVar, runtime_checkable

log = logging.getLogger(__name__)

T = TypeVar("T")

PREFIX = "asyncapi-"

# Provider name written by generated code
DEFAULT_PROVIDER = "asyncapi"


class ContextKey(StrEnum):
    """Well-known context keys."""
    VERSION = PREFIX + "version"
    PROVIDER = PREFIX + "provider"
    CHANNEL = PREFIX + "channel"
    # Value is a ``Direction``
    DIRECTION = PREFIX + "operation"
    # Value is a ``BrokerMessage``
    BROKER_MESSAGE = PREFIX + "broker-message"
    CORRELATION_ID = PREFIX + "correlationID"


@runtime_checkable
class ContextBag(Protocol):
    """Read side of a context carrier."""

    def get(self, key: str, /) -> Any: ...


class MessageContext(Mapping[str, Any]):
    """Immutable context carrier.

    ``with_value`` returns a new context; the receiver is left untouched.

    Examples
    --------
    >>> ctx = MessageContext().with_value(ContextKey.CHANNEL, "user/signup")
    >>> ctx.get(ContextKey.CHANNEL)
    'user/signup'
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: Mapping[str, Any] = MappingProxyType(dict(values or {}))

    def with_value(self, key: str, value: Any) -> MessageContext:
        return MessageContext({**self._values, str(key): value})

    def __getitem__(self, key: str) -> Any:
        return self._values[str(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"MessageContext({dict(self._values)!r})"


def _lookup(ctx: ContextBag, key: str) -> Any:
    # ContextKey members are str, so plain-string dict keys match them too
    return ctx.get(key)


def _matches(value: Any, type_: type) -> bool:
    if isinstance(value, bool) and type_ in (int, float):
        return False
    try:
        return isinstance(value, type_)
    except TypeError:
        # Parameterized generics (dict[str, bytes]) cannot be checked
        return False


def if_context_set_with(
    ctx: ContextBag,
    key: str,
    type_: type[T],
    fn: Callable[[T], Any],
) -> None:
    """Call ``fn(value)`` if *key* holds a value of type *type_*."""
    value = _lookup(ctx, key)
    if value is None:
        return
    if not _matches(value, type_):
        log.debug(
            "Context key %r holds %s, expected %s; skipping",
            str(key), type(value).__name__, getattr(type_, "__name__", repr(type_)),
        )
        return
    fn(value)


def if_context_not_set_with(
    ctx: ContextBag,
    key: str,
    type_: type[T],
    fn: Callable[[], Any],
) -> None:
    """Call ``fn()`` if *key* is absent.

    *type_* mirrors ``if_context_set_with``; a value of any type counts as set.
    """
    if _lookup(ctx, key) is None:
        fn()


def if_context_value_equals(
    ctx: ContextBag,
    key: str,
    expected: T,
    fn: Callable[[], Any],
) -> None:
    """Call ``fn()`` if *key* holds a value of ``type(expected)`` equal to *expected*."""

    def _check(value: T) -> None:
        if value == expected:
            fn()

    if_context_set_with(ctx, key, type(expected), _check)
