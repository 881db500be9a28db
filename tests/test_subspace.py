import json

import pytest

from subspace_core.constants import DEFAULT_SUBSPACE_OPS
from subspace_core.envelope import Envelope
from subspace_core.errors import (
    InvalidContent,
    InvalidEventKind,
    InvalidOpsFormat,
    InvalidSubspaceId,
    MissingRequiredContentField,
    MissingRequiredTag,
    SubspaceIdMismatch,
)
from subspace_core.identity import calculate_subspace_id
from subspace_core.subspace import (
    SubspaceCreateEvent,
    SubspaceJoinEvent,
    parse_ops,
    parse_subspace_create,
    parse_subspace_join,
)


def _create(**overrides):
    args = dict(
        name="research-dao",
        ops=DEFAULT_SUBSPACE_OPS,
        rules="energy>1000",
        description="A research collective",
        image_url="https://example.org/logo.png",
    )
    args.update(overrides)
    return SubspaceCreateEvent.new(**args)


def test_create_builder_tags_and_content():
    evt = _create()
    sid = calculate_subspace_id("research-dao", DEFAULT_SUBSPACE_OPS, "energy>1000")
    assert evt.kind == 30100
    assert evt.subspace_id == sid
    assert evt.tags == [
        ["d", "subspace_create"],
        ["sid", sid],
        ["subspace_name", "research-dao"],
        ["ops", DEFAULT_SUBSPACE_OPS],
        ["rules", "energy>1000"],
    ]
    assert json.loads(evt.content) == {
        "desc": "A research collective",
        "img_url": "https://example.org/logo.png",
    }


def test_create_without_rules_omits_tag():
    evt = _create(rules="")
    assert all(tag[0] != "rules" for tag in evt.tags)


def test_parse_create(registry):
    evt = parse_subspace_create(_create().event, registry)
    assert isinstance(evt, SubspaceCreateEvent)
    assert evt.subspace_name == "research-dao"
    assert evt.rules == "energy>1000"
    assert evt.description == "A research collective"
    assert evt.image_url == "https://example.org/logo.png"
    assert evt.allowed_operations()["vote"] == 30302


def test_tampered_sid_rejected(registry):
    env = _create().event
    env.tags[1] = ["sid", calculate_subspace_id("other", DEFAULT_SUBSPACE_OPS, "energy>1000")]
    with pytest.raises(SubspaceIdMismatch):
        parse_subspace_create(env, registry)


def test_tampered_ops_rejected(registry):
    env = _create().event
    env.tags[3] = ["ops", "post=30300"]
    with pytest.raises(SubspaceIdMismatch):
        parse_subspace_create(env, registry)


def test_missing_description_rejected(registry):
    with pytest.raises(MissingRequiredContentField) as exc:
        parse_subspace_create(_create(description="").event, registry)
    assert exc.value.field_name == "description"


def test_invalid_content_rejected(registry):
    env = _create().event
    env.content = "not json"
    with pytest.raises(InvalidContent):
        parse_subspace_create(env, registry)


def test_missing_ops_tag_rejected(registry):
    env = _create().event
    env.tags = [tag for tag in env.tags if tag[0] != "ops"]
    with pytest.raises(MissingRequiredTag) as exc:
        parse_subspace_create(env, registry)
    assert exc.value.tag == "ops"


def test_ops_without_kind_rejected(registry):
    with pytest.raises(InvalidOpsFormat):
        parse_subspace_create(_create(ops="post").event, registry)


def test_wrong_kind_rejected(registry):
    with pytest.raises(InvalidEventKind):
        parse_subspace_create(Envelope(kind=30200, tags=[["sid", "x"]]), registry)
    with pytest.raises(InvalidEventKind):
        parse_subspace_join(Envelope(kind=30100, tags=[["sid", "x"]]), registry)


def test_parse_ops():
    assert parse_ops("post=30300,vote=30302") == {"post": 30300, "vote": 30302}
    for bad in ("post", "post=", "post=abc", "=30300", "post=1,"):
        with pytest.raises(InvalidOpsFormat):
            parse_ops(bad)


def test_join_roundtrip(sid, registry):
    join = SubspaceJoinEvent.new(sid)
    assert join.tags == [["d", "subspace_join"], ["sid", sid]]
    evt = parse_subspace_join(join.event, registry)
    assert evt.subspace_id == sid
    assert evt.operation == "subspace_join"


def test_join_with_invalid_sid(registry):
    with pytest.raises(InvalidSubspaceId):
        parse_subspace_join(SubspaceJoinEvent.new("0x1234").event, registry)


def test_join_missing_marker(sid, registry):
    env = SubspaceJoinEvent.new(sid).event
    env.tags = env.tags[1:]
    with pytest.raises(MissingRequiredTag):
        parse_subspace_join(env, registry)
