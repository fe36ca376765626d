"""Naming helpers used by the code generation templates."""

from __future__ import annotations

import re

from asyncapi_codegen.asyncapi.schema import Channel, Schema
from asyncapi_codegen.codegen.acronyms import DEFAULT_ACRONYMS, Acronyms

_LEADING_NON_ALPHA = re.compile(r"^[^A-Za-z]+")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")
# aB, 1B -> a B, 1 B
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
# ABCd -> AB Cd
_UPPER_RUN = re.compile(r"([A-Z])([A-Z][a-z])")


def split_words(value: str) -> list[str]:
    """Split *value* into words on separators and camelCase humps."""
    words: list[str] = []
    for run in _NON_ALNUM.split(value):
        if not run:
            continue
        run = _LOWER_UPPER.sub(r"\1 \2", run)
        run = _UPPER_RUN.sub(r"\1 \2", run)
        words.extend(run.split())
    return words


def namify(raw: str, acronyms: Acronyms | None = None) -> str:
    """Turn *raw* into an exported identifier (``eh_oh__ah`` -> ``EhOhAh``).

    Leading digits are dropped, words are title-cased and whole words found
    in *acronyms* are upper-cased (``TotoId`` -> ``TotoID``).  Input with no
    alphanumeric content yields ``""``.
    """
    table = acronyms if acronyms is not None else DEFAULT_ACRONYMS
    parts: list[str] = []
    for word in split_words(_LEADING_NON_ALPHA.sub("", raw or "")):
        acronym = table.lookup(word)
        parts.append(acronym if acronym is not None else word[0].upper() + word[1:].lower())
    return "".join(parts)


def operation_name(channel: Channel) -> str:
    """Name of the operation carried by *channel*.

    The subscribe operation ID wins over the publish one; an operation
    without ID counts as absent.  Falls back to the channel name.
    """
    if channel.subscribe is not None and channel.subscribe.operation_id:
        return channel.subscribe.operation_id
    if channel.publish is not None and channel.publish.operation_id:
        return channel.publish.operation_id
    return channel.name


def is_required(schema: Schema, field: str) -> bool:
    """Return ``True`` if *field* is listed in *schema*'s required properties."""
    return field in schema.required
