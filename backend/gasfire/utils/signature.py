"""Attestation signatures for the verify endpoint.

The signer hashes ``abi.encode(address, bool, bytes32)`` with keccak256, signs
the digest as an EIP-191 personal message, and packs r and s into the 64-byte
compact form where the top bit of s carries the recovery parity (EIP-2098).
"""

from __future__ import annotations

from eth_abi import encode
from eth_account import Account
from eth_account.messages import encode_defunct
from eth_utils import keccak

_BYTES32 = 32
_PARITY_BIT = 1 << 255


def encode_counter(counter: str) -> bytes:
    """Decimal counter text as UTF-8, right-padded with zeros to 32 bytes."""
    raw = counter.encode("utf-8")
    if len(raw) > _BYTES32:
        raise ValueError(f"counter does not fit in bytes32: {counter!r}")
    return raw.ljust(_BYTES32, b"\x00")


def attestation_digest(address: str, eligible: bool, counter: str) -> bytes:
    encoded = encode(
        ["address", "bool", "bytes32"],
        [address, eligible, encode_counter(counter)],
    )
    return keccak(encoded)


def create_signature(private_key: str, address: str, eligible: bool, counter: str) -> str:
    """Sign the attestation and return ``0x`` + r + s as 128 hex chars."""
    message = encode_defunct(primitive=attestation_digest(address, eligible, counter))
    signed = Account.sign_message(message, private_key=private_key)

    s = signed.s
    if signed.v != 27:
        s |= _PARITY_BIT
    return "0x" + signed.r.to_bytes(_BYTES32, "big").hex() + s.to_bytes(_BYTES32, "big").hex()


def split_signature(signature: str) -> tuple[int, int, int]:
    """Inverse of the compact packing: (v, r, s)."""
    body = signature.removeprefix("0x")
    r = int(body[:64], 16)
    packed_s = int(body[64:128], 16)
    v = 28 if packed_s & _PARITY_BIT else 27
    return v, r, packed_s & (_PARITY_BIT - 1)
