"""AsyncAPI document descriptors consumed by the code generator."""

from __future__ import annotations

from asyncapi_codegen.asyncapi.schema import Channel, Operation, Schema

__all__ = [
    "Channel",
    "Operation",
    "Schema",
]
