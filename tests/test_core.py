import json
import logging

from subspace_core.crypto import (
    ed25519_generate,
    ed25519_sign,
    ed25519_verify,
    sign_envelope,
    verify_envelope,
)
from subspace_core.dispatch import decode_event
from subspace_core.envelope import Envelope
from subspace_core.logger import get_logger
from subspace_core.modules.governance import VoteEvent


def test_sign_verify(sid, registry):
    priv, pub = ed25519_generate()
    vote = VoteEvent.new(sid, registry)
    vote.set_vote("prop-1", "yes")

    env = sign_envelope(vote.event, priv)
    assert env.pubkey == pub.hex()
    assert verify_envelope(env)

    decoded = decode_event(env, registry)
    assert decoded.event.id == env.id
    assert verify_envelope(decoded.event)


def test_tampered_envelope_fails_verify():
    priv, _ = ed25519_generate()
    env = sign_envelope(Envelope(kind=30302, tags=[["vote", "yes"]]), priv)
    env.tags[0][1] = "no"
    assert not verify_envelope(env)

    unsigned = Envelope(kind=30302)
    assert not verify_envelope(unsigned)


def test_envelope_json_roundtrip():
    env = Envelope(kind=30600, tags=[["object_id", "o-1"], ["user_id", "ü"]], content="hi")
    restored = Envelope.from_json(env.to_json())
    assert restored == env
    assert restored.compute_id() == env.compute_id()


def test_envelope_to_dict_can_drop_signature():
    priv, _ = ed25519_generate()
    env = sign_envelope(Envelope(kind=30302), priv)
    assert env.to_dict()["sig"] == env.sig
    unsigned = env.to_dict(include_sig=False)
    assert unsigned["sig"] is None
    assert unsigned["id"] == env.id
    assert Envelope.from_dict(unsigned).sig is None


def test_envelope_tag_helpers():
    env = Envelope(tags=[["parent", "a"], ["x"], ["parent", "b", "c"]])
    assert env.get_tag("parent") == ["parent", "b", "c"]
    assert env.get_tag("x") is None
    assert env.tag_values("parent") == ["a", "b", "c"]


def test_logger_emits_json_lines(capsys, tmp_path):
    log_file = tmp_path / "logs" / "subspace.log"
    log = get_logger("Subspace.TestJson", level=logging.INFO, to_file=str(log_file))
    log.info("registry loaded")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["level"] == "INFO"
    assert record["name"] == "Subspace.TestJson"
    assert record["msg"] == "registry loaded"
    assert record["ts"].endswith("Z")
    assert "registry loaded" in log_file.read_text()


def test_logger_level_from_env(monkeypatch):
    monkeypatch.setenv("SUBSPACE_LOG_LEVEL", "debug")
    assert get_logger("Subspace.TestEnvLevel").level == logging.DEBUG

    monkeypatch.setenv("SUBSPACE_LOG_LEVEL", "nonsense")
    assert get_logger("Subspace.TestEnvLevel").level == logging.INFO


def test_verify_rejects_malformed_key_material():
    priv, pub = ed25519_generate()
    sig = ed25519_sign(priv, b"payload")
    assert ed25519_verify(pub, sig, b"payload")
    assert not ed25519_verify(pub[:-1], sig, b"payload")
    assert not ed25519_verify(pub, sig, b"other")

    env = sign_envelope(Envelope(kind=30302), priv)
    env.pubkey = "zz" + env.pubkey[2:]
    assert not verify_envelope(env)
