import pytest

from subspace_core.errors import InvalidSubspaceId
from subspace_core.identity import (
    calculate_subspace_id,
    is_valid_subspace_id,
    validate_subspace_id,
    verify_subspace_id,
)


def test_identity_is_deterministic():
    a = calculate_subspace_id("s", "o", "r")
    assert a == calculate_subspace_id("s", "o", "r")
    assert a.startswith("0x") and len(a) == 66
    validate_subspace_id(a)


def test_each_input_changes_identity():
    base = calculate_subspace_id("s", "o", "r")
    assert calculate_subspace_id("t", "o", "r") != base
    assert calculate_subspace_id("s", "p", "r") != base
    assert calculate_subspace_id("s", "o", "q") != base


def test_concatenation_collision():
    # Fields are hashed without a separator, so shifting a boundary collides
    assert calculate_subspace_id("ab", "c", "") == calculate_subspace_id("a", "bc", "")
    assert calculate_subspace_id("a", "b", "c") == calculate_subspace_id("", "", "abc")


def test_verify_subspace_id():
    sid = calculate_subspace_id("dao", "post=30300", "")
    assert verify_subspace_id(sid, "dao", "post=30300", "")
    assert not verify_subspace_id(sid, "dao", "post=30300", "x")


@pytest.mark.parametrize("sid", [
    "0x" + "a" * 63,
    "0x" + "a" * 65,
    "ab" + "a" * 64,
    "a" * 66,
    "0x" + "g" * 64,
    "0x" + "a" * 63 + " ",
    "",
])
def test_validate_rejects(sid):
    assert not is_valid_subspace_id(sid)
    with pytest.raises(InvalidSubspaceId):
        validate_subspace_id(sid)


def test_validate_accepts_mixed_case_hex():
    assert is_valid_subspace_id("0x" + "aB09" * 16)
