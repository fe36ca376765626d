"""Context keys and typed accessors shared by generated code and broker integrations."""

from __future__ import annotations

from asyncapi_codegen.extensions.broker import BrokerMessage, Direction
from asyncapi_codegen.extensions.context import (
    DEFAULT_PROVIDER,
    PREFIX,
    ContextBag,
    ContextKey,
    MessageContext,
    if_context_not_set_with,
    if_context_set_with,
    if_context_value_equals,
)

__all__ = [
    "DEFAULT_PROVIDER",
    "PREFIX",
    "BrokerMessage",
    "ContextBag",
    "ContextKey",
    "Direction",
    "MessageContext",
    "if_context_not_set_with",
    "if_context_set_with",
    "if_context_value_equals",
]
