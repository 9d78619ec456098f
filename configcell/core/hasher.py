"""Content hashing and account fingerprints.

All digests use blake2b-256 with the ``ckb-default-hash`` personalization so
that the content hashes written into cell data match what the chain computes
over the same bytes.
"""

from __future__ import annotations

import hashlib

CKB_HASH_PERSONALIZATION = b"ckb-default-hash"
HASH_LENGTH = 32
DEFAULT_ACCOUNT_ID_LENGTH = 20


def blake2b_256(data: bytes) -> bytes:
    """Return the 32-byte CKB blake2b digest of raw bytes."""
    return hashlib.blake2b(
        data, digest_size=HASH_LENGTH, person=CKB_HASH_PERSONALIZATION
    ).digest()


def blake2b_256_hex(data: bytes) -> str:
    """Return the CKB blake2b digest of raw bytes as lowercase hex."""
    return blake2b_256(data).hex()


def account_fingerprint(
    account: str, length: int = DEFAULT_ACCOUNT_ID_LENGTH
) -> bytes:
    """Derive the fixed-length identifier of an account name.

    The account is UTF-8 encoded, hashed, and the first *length* bytes of the
    digest are kept.  Fingerprints are used for grouping and ordering only;
    they are never reversed.
    """
    if not 0 < length <= HASH_LENGTH:
        raise ValueError(
            f"Fingerprint length must be in 1..{HASH_LENGTH}, got {length}"
        )
    return blake2b_256(account.encode("utf-8"))[:length]
