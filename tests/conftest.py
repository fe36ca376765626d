"""Shared test fixtures for asyncapi-codegen."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True, scope="session")
def clean_codegen_env():
    """Drop generator settings inherited from the developer's shell."""
    with pytest.MonkeyPatch.context() as mp:
        for name in list(os.environ):
            if name.startswith("ASYNCAPI_CODEGEN_"):
                mp.delenv(name)
        yield
