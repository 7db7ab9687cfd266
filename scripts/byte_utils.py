#!/usr/bin/env python3
"""HMAC, padding and concatenation helpers for 32-byte word handling."""
from __future__ import annotations

import argparse
import binascii
import hashlib
import hmac
import sys
from typing import Iterable

WORD_SIZE = 32

# RFC 4231 test cases 1 and 2.
_HMAC_VECTORS = (
    {
        "name": "rfc4231_case1",
        "key_hex": "0b" * 20,
        "message_hex": "4869205468657265",
        "digest_hex": "b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7",
    },
    {
        "name": "rfc4231_case2",
        "key_hex": "4a656665",
        "message_hex": "7768617420646f2079612077616e7420666f72206e6f7468696e673f",
        "digest_hex": "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843",
    },
)


class DecodeError(ValueError):
    """Raised when a string is not valid hexadecimal."""


def decode_hex(hex_string: str) -> bytes:
    """Decode *hex_string* (no prefix) into bytes.

    Odd-length input and non-hex characters raise :class:`DecodeError`.
    """
    try:
        return binascii.unhexlify(hex_string)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"invalid hex string: {hex_string!r}") from exc


def strip_0x(value: str) -> str:
    return value[2:] if value.startswith("0x") else value


def compute_hmac_digest(message: bytes, secret: bytes) -> bytes:
    """Return the HMAC-SHA256 digest of *message* keyed by *secret*."""
    return hmac.new(bytes(secret), bytes(message), hashlib.sha256).digest()


def pad_hex_string_to_32_bytes(hex_string: str) -> bytes:
    """Decode an optionally ``0x``-prefixed hex string into a 32-byte word.

    The decoded bytes are right-aligned and the leading bytes are zero. Data
    wider than 32 bytes raises ``OverflowError`` rather than being truncated.
    """
    data = decode_hex(strip_0x(hex_string))
    if len(data) > WORD_SIZE:
        raise OverflowError(
            f"hex string decodes to {len(data)} bytes, more than {WORD_SIZE}"
        )
    return data.rjust(WORD_SIZE, b"\x00")


def pad_to_32_bytes(data: bytes | bytearray) -> bytes | bytearray:
    """Right-align *data* in a zero-filled 32-byte word.

    Inputs already 32 bytes or longer are returned as-is, so a long
    ``bytearray`` comes back as the same ``bytearray``; shorter inputs always
    yield a new ``bytes``.
    """
    if len(data) >= WORD_SIZE:
        return data
    return bytes(data).rjust(WORD_SIZE, b"\x00")


def concat_bytes(*parts: bytes) -> bytes:
    return b"".join(parts)


def run_self_test() -> None:
    for vector in _HMAC_VECTORS:
        digest = compute_hmac_digest(
            bytes.fromhex(vector["message_hex"]), bytes.fromhex(vector["key_hex"])
        ).hex()
        expected = vector["digest_hex"]
        if digest != expected:
            raise RuntimeError(
                f"HMAC-SHA256 self-test failed for {vector['name']}: {digest} != {expected}"
            )


def _build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Byte word helper utilities")
    sub = parser.add_subparsers(dest="command", required=True)

    hmac_parser = sub.add_parser("hmac", help="Emit HMAC-SHA256 hex digest")
    hmac_parser.add_argument("--key-hex", required=True, help="Secret key hex")
    hmac_parser.add_argument("--message-hex", default="", help="Message hex")

    pad_parser = sub.add_parser("pad32", help="Left-pad hex data to a 32-byte word")
    pad_parser.add_argument("hex", help="Hex data, optionally 0x-prefixed")

    concat_parser = sub.add_parser("concat", help="Concatenate hex byte strings")
    concat_parser.add_argument("parts", nargs="*", help="Hex data, optionally 0x-prefixed")

    sub.add_parser("self-test", help="Run HMAC test vectors")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_cli()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        if args.command == "hmac":
            digest = compute_hmac_digest(
                decode_hex(strip_0x(args.message_hex)), decode_hex(strip_0x(args.key_hex))
            )
            print(digest.hex())
            return 0
        if args.command == "pad32":
            print(pad_hex_string_to_32_bytes(args.hex).hex())
            return 0
        if args.command == "concat":
            print(concat_bytes(*(decode_hex(strip_0x(p)) for p in args.parts)).hex())
            return 0
        if args.command == "self-test":
            run_self_test()
            print("ok")
            return 0
    except (ValueError, OverflowError, RuntimeError) as exc:
        print("error:", exc, file=sys.stderr)
        return 1
    parser.error("unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
