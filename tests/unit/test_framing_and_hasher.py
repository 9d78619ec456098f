"""Unit tests for length-prefixed framing and account fingerprints."""

from __future__ import annotations

import hashlib

import pytest

from configcell.core.framing import LENGTH_HEADER_SIZE, prepend_length, read_length
from configcell.core.hasher import (
    account_fingerprint,
    blake2b_256,
    blake2b_256_hex,
)


class TestPrependLength:
    def test_empty_buffer_gets_zero_header(self):
        assert prepend_length(b"") == b"\x00\x00\x00\x00"

    def test_header_is_little_endian_byte_count(self):
        framed = prepend_length(b"abc")
        assert framed == b"\x03\x00\x00\x00abc"

    def test_large_length_spans_header_bytes(self):
        raw = b"\x01" * 0x0102
        framed = prepend_length(raw)
        assert framed[:LENGTH_HEADER_SIZE] == b"\x02\x01\x00\x00"
        assert framed[LENGTH_HEADER_SIZE:] == raw

    def test_read_length_matches_prepended(self):
        assert read_length(prepend_length(b"x" * 77)) == 77

    def test_read_length_rejects_short_buffer(self):
        with pytest.raises(ValueError):
            read_length(b"\x01\x00")


class TestBlake2b:
    def test_digest_is_32_bytes(self):
        assert len(blake2b_256(b"")) == 32

    def test_uses_ckb_personalization(self):
        expected = hashlib.blake2b(
            b"das", digest_size=32, person=b"ckb-default-hash"
        ).digest()
        assert blake2b_256(b"das") == expected
        # Personalization changes the digest
        assert blake2b_256(b"das") != hashlib.blake2b(b"das", digest_size=32).digest()

    def test_hex_variant(self):
        assert blake2b_256_hex(b"das") == blake2b_256(b"das").hex()


class TestAccountFingerprint:
    def test_default_length_is_20(self):
        assert len(account_fingerprint("google")) == 20

    def test_is_prefix_of_full_digest(self):
        assert account_fingerprint("google") == blake2b_256(b"google")[:20]

    def test_deterministic(self):
        assert account_fingerprint("apple") == account_fingerprint("apple")

    def test_distinct_accounts_differ(self):
        assert account_fingerprint("apple") != account_fingerprint("apples")

    def test_utf8_encoding(self):
        assert account_fingerprint("😂") == blake2b_256("😂".encode("utf-8"))[:20]

    def test_custom_length(self):
        assert len(account_fingerprint("apple", 16)) == 16

    @pytest.mark.parametrize("length", [0, 33])
    def test_rejects_out_of_range_length(self, length):
        with pytest.raises(ValueError):
            account_fingerprint("apple", length)
