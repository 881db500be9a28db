import pytest

from subspace_core.auth import Action, AuthTag, new_auth_tag, parse_auth_tag
from subspace_core.errors import MalformedAuthTag


def test_parse_example():
    tag = parse_auth_tag("action=3,key=30300,exp=1000")
    assert tag == AuthTag(action=3, key=30300, exp=1000)


def test_serialize_parse_roundtrip():
    for tag in (
        new_auth_tag(Action.READ | Action.WRITE, 30300, 1000),
        new_auth_tag(0, 0, 0),
        new_auth_tag(255, 2**32 - 1, 2**64 - 1),
    ):
        assert AuthTag.parse(tag.serialize()) == tag


def test_fields_in_any_order_serialize_canonically():
    tag = AuthTag.parse("exp=1000,key=5,action=2")
    assert tag == AuthTag(action=2, key=5, exp=1000)
    assert str(tag) == "action=2,key=5,exp=1000"


@pytest.mark.parametrize("text", [
    "",
    "action=1,key=30300",
    "action=1,key=30300,exp=1000,extra=value",
    "action=1,key=30300,foo=1000",
    "action=x,key=30300,exp=1000",
    "action=1,key=30300,exp=1000,",
    ",action=1,key=30300,exp=1000",
    "action=1,key=30300,",
    "action=1,action=1,exp=1000",
    "action=1,key=30300,exp",
    "action=1,key=1=2,exp=3",
    "action=-1,key=30300,exp=1000",
    "action=+1,key=30300,exp=1000",
    "action= 1,key=30300,exp=1000",
    "action=256,key=30300,exp=1000",
    "action=1,key=4294967296,exp=1000",
    "action=1,key=1,exp=18446744073709551616",
])
def test_parse_rejects(text):
    with pytest.raises(MalformedAuthTag):
        AuthTag.parse(text)


def test_malformed_auth_tag_is_value_error():
    with pytest.raises(ValueError) as exc:
        parse_auth_tag("action=1")
    assert exc.value.text == "action=1"


def test_expiration_boundary():
    tag = new_auth_tag(Action.READ, 1, 100)
    assert tag.is_expired(100)
    assert tag.is_expired(101)
    assert not tag.is_expired(99)


def test_has_permission_is_any_of():
    tag = new_auth_tag(Action.READ | Action.WRITE, 1, 100)
    assert tag.has_permission(Action.READ)
    assert tag.has_permission(Action.WRITE)
    assert not tag.has_permission(Action.EXECUTE)
    # any requested bit is enough
    assert tag.has_permission(Action.WRITE | Action.EXECUTE)
    assert tag.permissions == Action.READ | Action.WRITE


def test_to_tag_and_dict():
    tag = new_auth_tag(Action.EXECUTE, 7, 9)
    assert tag.to_tag() == ["auth", "action=4,key=7,exp=9"]
    assert AuthTag.from_dict(tag.to_dict()) == tag


@pytest.mark.parametrize("action, key, exp", [
    (256, 1, 1),
    (-1, 1, 1),
    (1, -1, 1),
    (1, 2**32, 1),
    (1, 1, 2**64),
    (1, 1, -5),
    (1, "7", 1),
])
def test_new_rejects_values_outside_wire_widths(action, key, exp):
    with pytest.raises(MalformedAuthTag):
        new_auth_tag(action, key, exp)


def test_from_dict_is_width_checked():
    with pytest.raises(MalformedAuthTag):
        AuthTag.from_dict({"action": 1, "key": 1, "exp": 2**64})
