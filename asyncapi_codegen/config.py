"""Environment-driven generator settings."""

from __future__ import annotations

import json
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from asyncapi_codegen.codegen.acronyms import DEFAULT_ACRONYMS, Acronyms


class CodegenSettings(BaseSettings):
    """Settings read from ``ASYNCAPI_CODEGEN_*`` variables or ``.env``."""

    # JSON list or comma-separated: "SKU,EAN"
    extra_acronyms: Annotated[list[str], NoDecode] = []

    model_config = {"env_prefix": "ASYNCAPI_CODEGEN_", "env_file": ".env", "extra": "ignore"}

    @field_validator("extra_acronyms", mode="before")
    @classmethod
    def _split_acronyms(cls, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip()
            if text.startswith("["):
                return json.loads(text)
            return [part.strip() for part in text.split(",") if part.strip()]
        return value


def load_acronyms(settings: CodegenSettings | None = None) -> Acronyms:
    """Return the seed acronym table extended with configured entries.

    Raises
    ------
    asyncapi_codegen.exceptions.InvalidAcronymError
        If a configured entry is not an ASCII alphanumeric token.
    """
    settings = settings or CodegenSettings()
    if not settings.extra_acronyms:
        return DEFAULT_ACRONYMS
    return DEFAULT_ACRONYMS.extended(*settings.extra_acronyms)
