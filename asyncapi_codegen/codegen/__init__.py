"""Identifier helpers shared by the generator templates.

Public API:
    - namify          - raw name to exported identifier
    - split_words     - tokenizer behind ``namify``
    - operation_name  - subscribe/publish operation ID or channel name
    - is_required     - schema required-property check
    - Acronyms        - immutable acronym table
"""

from __future__ import annotations

from asyncapi_codegen.codegen.acronyms import DEFAULT_ACRONYMS, SEED_ACRONYMS, Acronyms
from asyncapi_codegen.codegen.naming import is_required, namify, operation_name, split_words

__all__ = [
    "DEFAULT_ACRONYMS",
    "SEED_ACRONYMS",
    "Acronyms",
    "is_required",
    "namify",
    "operation_name",
    "split_words",
]
