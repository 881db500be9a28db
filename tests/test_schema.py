import json

import pytest

from subspace_core.dispatch import decode_event
from subspace_core.errors import MissingRequiredTag, SchemaError
from subspace_core.operation import OperationRecord
from subspace_core.registry import KindRegistry
from subspace_core.schema import load_module_schema, module_from_schema


VOTING = {
    "name": "voting",
    "package": "cip10",
    "description": "Weighted ballots",
    "events": [
        {
            "name": "BallotEvent",
            "operation": "ballot",
            "kind": 31000,
            "description": "A weighted ballot.",
            "fields": [
                {"name": "proposal_id", "required": True},
                {"name": "choices", "tag": "choice", "multiple": True},
                {"name": "weights", "type": "map"},
            ],
        },
        {"name": "TallyEvent", "operation": "tally", "kind": 31001, "fields": [{"name": "result"}]},
    ],
}


@pytest.fixture
def voting_registry():
    module = module_from_schema(VOTING)
    r = KindRegistry()
    r.register_module(module)
    r.lock()
    return module, r


def test_module_from_schema(voting_registry):
    module, r = voting_registry
    assert module.name == "voting"
    assert module.declarations() == {31000: "ballot", 31001: "tally"}
    ballot = module.decoder_for("ballot")
    assert issubclass(ballot, OperationRecord)
    assert ballot.__name__ == "BallotEvent"
    assert [f.metadata["tag"] for f in ballot.payload_fields()] == ["proposal_id", "choice", "weights"]


def test_schema_record_build_and_decode(sid, voting_registry):
    module, r = voting_registry
    ballot = module.decoder_for("ballot").new(sid, r)
    with pytest.raises(MissingRequiredTag):
        ballot.validate()

    ballot.set_fields(proposal_id="prop-1", choices=["a", "b"], weights={"a": "2", "b": "1"})
    ballot.validate()
    assert ballot.tags[3:] == [["proposal_id", "prop-1"], ["choice", "a", "b"], ["weights", "a:2,b:1"]]

    decoded = decode_event(ballot.event, r)
    assert type(decoded) is module.decoder_for("ballot")
    assert decoded.payload() == {"proposal_id": "prop-1", "choices": ["a", "b"], "weights": {"a": "2", "b": "1"}}


def test_load_module_schema(tmp_path):
    path = tmp_path / "voting.json"
    path.write_text(json.dumps(VOTING), encoding="utf-8")
    module = load_module_schema(path)
    assert module.package == "cip10"
    assert module.decoder_for("tally") is not None


def test_invalid_json_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaError):
        load_module_schema(path)


def _with_event(**event):
    base = {"name": "XEvent", "operation": "x", "kind": 31000}
    base.update(event)
    return {"name": "m", "package": "cip99", "events": [base]}


@pytest.mark.parametrize("data", [
    [],
    {"package": "cip99", "events": [{"name": "X", "operation": "x", "kind": 1}]},
    {"name": "m", "events": [{"name": "X", "operation": "x", "kind": 1}]},
    {"name": "m", "package": "cip99", "events": []},
    _with_event(kind="31000"),
    _with_event(kind=-1),
    _with_event(kind=True),
    _with_event(name="not a class"),
    _with_event(operation=""),
    _with_event(fields=[{"name": "x", "type": "number"}]),
    _with_event(fields=[{"name": "x", "tag": "sid"}]),
    _with_event(fields=[{"name": "header"}]),
    _with_event(fields=[{"name": "content"}]),
    _with_event(fields=[{"name": "kind"}]),
    _with_event(fields=[{"name": "a", "tag": "t"}, {"name": "b", "tag": "t"}]),
    _with_event(fields=[{"name": "a"}, {"name": "a"}]),
    _with_event(fields=[{"name": "from"}]),
    _with_event(fields=[{"name": "class", "tag": "cls"}]),
    _with_event(fields=5),
    _with_event(fields=[{"name": "x", "required": "yes"}]),
    _with_event(name="class"),
    {"name": "m", "package": "cip99", "events": [
        {"name": "A", "operation": "a", "kind": 1},
        {"name": "B", "operation": "b", "kind": 1},
    ]},
    {"name": "m", "package": "cip99", "events": [
        {"name": "A", "operation": "a", "kind": 1},
        {"name": "B", "operation": "a", "kind": 2},
    ]},
])
def test_invalid_schema(data):
    with pytest.raises(SchemaError):
        module_from_schema(data)


def test_keyword_tag_with_identifier_field_name(sid):
    module = module_from_schema(_with_event(fields=[{"name": "from_entity", "tag": "from"}]))
    r = KindRegistry()
    r.register_module(module)
    record = module.decoder_for("x").new(sid, r)
    record.set_fields(from_entity="A")
    assert record.tags[-1] == ["from", "A"]
    assert decode_event(record.event, r).from_entity == "A"


def test_schema_error_keeps_validation_details():
    with pytest.raises(SchemaError) as exc:
        module_from_schema(_with_event(fields=5))
    assert "fields" in str(exc.value)
