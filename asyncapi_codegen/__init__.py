"""Naming core of the AsyncAPI code generator.

Public API:
    - namify                   - raw name to exported identifier
    - operation_name           - operation ID of a channel, or its name
    - is_required              - schema required-property check
    - Acronyms                 - immutable acronym table
    - load_acronyms            - seed table plus configured acronyms
    - CodegenSettings          - environment-driven settings
    - ContextKey               - well-known message context keys
    - if_context_set_with      - run a callback when a typed value is set
    - if_context_not_set_with  - run a callback when a key is absent
    - if_context_value_equals  - run a callback when a value matches
    - CodegenError             - base exception for blanket catch
    - InvalidAcronymError      - raised on a malformed acronym entry
"""

from __future__ import annotations

from asyncapi_codegen.asyncapi import Channel, Operation, Schema
from asyncapi_codegen.codegen import Acronyms, is_required, namify, operation_name
from asyncapi_codegen.config import CodegenSettings, load_acronyms
from asyncapi_codegen.exceptions import CodegenError, InvalidAcronymError
from asyncapi_codegen.extensions import (
    BrokerMessage,
    ContextKey,
    Direction,
    MessageContext,
    if_context_not_set_with,
    if_context_set_with,
    if_context_value_equals,
)

__all__ = [
    "Acronyms",
    "BrokerMessage",
    "Channel",
    "CodegenError",
    "CodegenSettings",
    "ContextKey",
    "Direction",
    "InvalidAcronymError",
    "MessageContext",
    "Operation",
    "Schema",
    "if_context_not_set_with",
    "if_context_set_with",
    "if_context_value_equals",
    "is_required",
    "load_acronyms",
    "namify",
    "operation_name",
]
