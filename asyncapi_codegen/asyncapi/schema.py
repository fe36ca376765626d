"""Pydantic v2 descriptors for the parts of an AsyncAPI document the
naming helpers read.

Only the fields consumed by the generator templates are modelled; unknown
keys from the source document are ignored.  Models accept both the AsyncAPI
JSON spelling (``operationId``) and the Python field names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(populate_by_name=True, extra="ignore")


class Schema(BaseModel):
    """An AsyncAPI (JSON Schema) object."""

    model_config = _MODEL_CONFIG

    type: str = Field(default="", description="JSON Schema type name")
    description: str = Field(default="")
    properties: dict[str, Schema] = Field(default_factory=dict)
    required: list[str] = Field(
        default_factory=list,
        description="Names of the properties that must be present",
    )


class Operation(BaseModel):
    """A subscribe or publish action declared on a channel."""

    model_config = _MODEL_CONFIG

    operation_id: str = Field(default="", alias="operationId")
    summary: str = Field(default="")
    description: str = Field(default="")


class Channel(BaseModel):
    """A channel with zero or one operation on each side."""

    model_config = _MODEL_CONFIG

    name: str = Field(description="Channel name as declared in the document")
    subscribe: Operation | None = Field(default=None)
    publish: Operation | None = Field(default=None)
