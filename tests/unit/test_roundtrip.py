"""Unit tests for re-encoding decoded events."""

from __future__ import annotations

import msgspec
import pytest

from ghwebhooks import EventDecoder, RepositoryEvent, encode
from tests.helpers.payloads import EVENT_NAMES, minimal_payload, to_json


@pytest.mark.parametrize("event_name", EVENT_NAMES)
def test_encode_then_decode_is_identity(
    decoder: EventDecoder, event_name: str
) -> None:
    """Re-encoding a decoded event and decoding it again yields an equal event."""
    event = decoder.decode_with_hint(to_json(minimal_payload(event_name)), event_name)

    assert decoder.decode_with_hint(decoder.encode(event), event_name) == event


def test_encoding_uses_wire_names_and_values(decoder: EventDecoder) -> None:
    """Encoded events carry snake_case keys and raw action strings."""
    event = decoder.decode_with_hint(
        to_json(minimal_payload("repository")), "repository"
    )

    document = msgspec.json.decode(encode(event))

    assert document["action"] == "publicized"
    assert document["repository"]["full_name"] == "octocat/Hello-World"
    assert "zen" not in document


@pytest.mark.parametrize(
    "description",
    [
        pytest.param(None, id="null"),
        pytest.param("A mirror", id="string"),
        pytest.param({"text": "A mirror", "lang": "en"}, id="object"),
        pytest.param([1, "two", None], id="array"),
    ],
)
def test_opaque_values_survive_round_trip(
    decoder: EventDecoder, description: object
) -> None:
    """Opaque fields keep whatever JSON value they were given."""
    payload = minimal_payload("repository")
    payload["repository"]["description"] = description

    event = decoder.decode_with_hint(to_json(payload), "repository")

    assert isinstance(event, RepositoryEvent)
    assert event.repository.description == description
    again = decoder.decode_with_hint(decoder.encode(event), "repository")
    assert again.repository.description == description


def test_replaced_events_encode_the_new_value(decoder: EventDecoder) -> None:
    """Events are immutable; msgspec.structs.replace builds modified copies."""
    event = decoder.decode_with_hint(
        to_json(minimal_payload("repository")), "repository"
    )
    assert isinstance(event, RepositoryEvent)

    with pytest.raises(AttributeError):
        event.action = event.action  # type: ignore[misc]

    changed = msgspec.structs.replace(
        event,
        repository=msgspec.structs.replace(event.repository, description="renamed"),
    )

    again = decoder.decode_with_hint(decoder.encode(changed), "repository")
    assert isinstance(again, RepositoryEvent)
    assert again.repository.description == "renamed"
    assert again != event
