"""Tests for codegen.naming - operation name resolution and required fields.

Test taxonomy
-------------
Fallback     no operation / operations without ID -> channel name
Subscribe    subscribe operation ID is used
Publish      publish operation ID is used
Precedence   subscribe wins over publish
Parsing      AsyncAPI spelling (operationId) accepted
Required     exact membership in Schema.required
Property     Hypothesis: subscribe ID always wins when set
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from asyncapi_codegen.asyncapi.schema import Channel, Operation, Schema
from asyncapi_codegen.codegen.naming import is_required, operation_name


@pytest.mark.parametrize(
    ("channel", "expected"),
    [
        # By default
        (Channel(name="Default"), "Default"),
        # With subscribe but no operation ID
        (Channel(name="Default", subscribe=Operation()), "Default"),
        # With subscribe and operation ID
        (Channel(name="Default", subscribe=Operation(operation_id="Subscribe")), "Subscribe"),
        # With publish but no operation ID
        (Channel(name="Default", publish=Operation()), "Default"),
        # With publish and operation ID
        (Channel(name="Default", publish=Operation(operation_id="Publish")), "Publish"),
    ],
)
def test_operation_name(channel: Channel, expected: str) -> None:
    assert operation_name(channel) == expected


class TestPrecedence:

    def test_subscribe_wins_over_publish(self) -> None:
        channel = Channel(
            name="Default",
            subscribe=Operation(operation_id="Sub"),
            publish=Operation(operation_id="Pub"),
        )
        assert operation_name(channel) == "Sub"

    def test_empty_subscribe_falls_through_to_publish(self) -> None:
        channel = Channel(
            name="Default",
            subscribe=Operation(),
            publish=Operation(operation_id="Pub"),
        )
        assert operation_name(channel) == "Pub"

    def test_both_empty_falls_back_to_name(self) -> None:
        channel = Channel(name="Default", subscribe=Operation(), publish=Operation())
        assert operation_name(channel) == "Default"

    @given(sub=st.text(min_size=1), pub=st.text(), name=st.text())
    @settings(max_examples=100)
    def test_subscribe_always_wins(self, sub: str, pub: str, name: str) -> None:
        channel = Channel(
            name=name,
            subscribe=Operation(operation_id=sub),
            publish=Operation(operation_id=pub),
        )
        assert operation_name(channel) == sub


class TestParsing:

    def test_asyncapi_spelling(self) -> None:
        channel = Channel.model_validate(
            {
                "name": "user/signedup",
                "subscribe": {"operationId": "onUserSignedUp", "summary": "x"},
                "bindings": {"amqp": {}},
            }
        )
        assert operation_name(channel) == "onUserSignedUp"
        assert channel.publish is None


class TestIsRequired:

    def test_is_required(self) -> None:
        assert is_required(Schema(required=["field"]), "field")

    def test_is_not_required(self) -> None:
        assert not is_required(Schema(required=["another_field"]), "field")

    def test_no_required_list(self) -> None:
        assert not is_required(Schema(), "field")

    def test_exact_match_only(self) -> None:
        schema = Schema(required=["Field", "field_id"])
        assert not is_required(schema, "field")

    def test_nested_schema_parsing(self) -> None:
        schema = Schema.model_validate(
            {
                "type": "object",
                "properties": {"id": {"type": "string"}, "name": {"type": "string"}},
                "required": ["id"],
            }
        )
        assert is_required(schema, "id")
        assert not is_required(schema, "name")
        assert schema.properties["id"].type == "string"
