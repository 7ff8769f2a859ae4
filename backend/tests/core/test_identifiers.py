"""Entity identifiers: malformed ids fail with MALFORMED_ID, valid ids parse."""

from uuid import UUID, uuid4

from fitness_api.core.errors import ErrorKind
from fitness_api.core.identifiers import parse_entity_id
from fitness_api.core.outcome import Failure, Ok


def test_valid_uuid_parses():
    raw = uuid4()
    outcome = parse_entity_id(str(raw), "workout")
    assert outcome == Ok(raw)


def test_uppercase_uuid_parses():
    raw = "6F9619FF-8B86-D011-B42D-00C04FC964FF"
    outcome = parse_entity_id(raw, "workout")
    assert isinstance(outcome, Ok)
    assert outcome.value == UUID(raw)


def test_malformed_id_is_failure():
    outcome = parse_entity_id("badid", "workout")
    assert isinstance(outcome, Failure)
    assert outcome.kind is ErrorKind.MALFORMED_ID
    assert outcome.message == "Invalid workout ID"
    assert outcome.http_status == 400


def test_numeric_and_empty_ids_are_malformed():
    for raw in ("12345", "", "6f9619ff-8b86-d011-b42d"):
        assert isinstance(parse_entity_id(raw, "workout"), Failure)
