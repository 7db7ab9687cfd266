#!/usr/bin/env python3
"""Keccak-256 hashing as used by Ethereum."""
from __future__ import annotations

import argparse
import sys
from typing import Iterable

from Crypto.Hash import keccak

from byte_utils import decode_hex, strip_0x

DIGEST_SIZE = 32

# (name, message, expected digest)
KNOWN_DIGESTS = (
    ("empty", b"", "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"),
    ("abc", b"abc", "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"),
    (
        "quickfox",
        b"The quick brown fox jumps over the lazy dog",
        "4d741b6f1eb29cb2a9b9911c82f56fa8d73b04959d3d9d222895df6c0b28aa15",
    ),
    ("a3x200", b"\xa3" * 200, "3a57666b048777f2c953dc4456f45a2588e1cb6f2da760122d530ac2ce607d4a"),
)


def keccak256(data: bytes) -> bytes:
    """Compute the legacy (pre-NIST) Keccak-256 digest of *data*.

    This is the variant used by Ethereum; it differs from ``hashlib.sha3_256``
    in its padding byte and so produces different digests.
    """
    hasher = keccak.new(digest_bits=256)
    hasher.update(bytes(data))
    return hasher.digest()


def keccak256_hex(data: bytes) -> str:
    return keccak256(data).hex()


def run_self_test() -> None:
    for name, message, expected in KNOWN_DIGESTS:
        digest = keccak256_hex(message)
        if digest != expected:
            raise RuntimeError(f"Keccak-256 self-test failed for {name}: {digest} != {expected}")


def _build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Keccak-256 hashing")
    sub = parser.add_subparsers(dest="command", required=True)

    hash_parser = sub.add_parser("keccak", help="Emit the Keccak-256 digest of hex data")
    hash_parser.add_argument("hex", help="Data as hex, optionally 0x-prefixed")

    sub.add_parser("self-test", help="Check the known digests")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_cli()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        if args.command == "keccak":
            print(keccak256_hex(decode_hex(strip_0x(args.hex))))
            return 0
        if args.command == "self-test":
            run_self_test()
            print("ok")
            return 0
    except (ValueError, RuntimeError) as exc:
        print("error:", exc, file=sys.stderr)
        return 1
    parser.error("unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
