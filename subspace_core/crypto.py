"""
subspace_core.crypto
--------------------
Signing primitives for operation envelopes:

- Ed25519: digital signatures for envelope authenticity
- Envelope helpers: sign_envelope(), verify_envelope()

The envelope id is the sha256 of its canonical serialization; the signature
covers the raw id bytes. Keys travel as hex strings on the envelope.
"""

from __future__ import annotations
from typing import Tuple
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519
from .envelope import Envelope

KeyPair = Tuple[bytes, bytes]  # (private raw, public raw), 32 bytes each


def _signing_key(priv_raw: bytes) -> ed25519.Ed25519PrivateKey:
    return ed25519.Ed25519PrivateKey.from_private_bytes(priv_raw)


# --------- Ed25519 (sign/verify) ----------
def ed25519_generate() -> KeyPair:
    priv_raw = ed25519.Ed25519PrivateKey.generate().private_bytes_raw()
    return priv_raw, ed25519_public(priv_raw)

def ed25519_public(priv_raw: bytes) -> bytes:
    return _signing_key(priv_raw).public_key().public_bytes_raw()

def ed25519_sign(priv_raw: bytes, data: bytes) -> bytes:
    return _signing_key(priv_raw).sign(data)

def ed25519_verify(pub_raw: bytes, sig: bytes, data: bytes) -> bool:
    # Malformed keys and bad signatures both count as "does not verify"
    try:
        verifier = ed25519.Ed25519PublicKey.from_public_bytes(pub_raw)
        verifier.verify(sig, data)
    except (InvalidSignature, ValueError):
        return False
    return True

# --------- Envelope helpers ----------
def sign_envelope(env: Envelope, priv_raw: bytes) -> Envelope:
    """Stamp pubkey, id and signature onto env (in place) and return it."""
    env.pubkey = ed25519_public(priv_raw).hex()
    env.id = env.compute_id()
    env.sig = ed25519_sign(priv_raw, bytes.fromhex(env.id)).hex()
    return env

def verify_envelope(env: Envelope) -> bool:
    if not env.sig or not env.check_id():
        return False
    try:
        pub_raw, sig = bytes.fromhex(env.pubkey), bytes.fromhex(env.sig)
    except ValueError:
        return False
    return ed25519_verify(pub_raw, sig, bytes.fromhex(env.id))
