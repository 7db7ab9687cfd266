#!/usr/bin/env python3
"""EIP-55 mixed-case checksum encoding for Ethereum addresses.

Encoding accepts raw inputs of up to 32 bytes; longer inputs raise
``ValueError`` from :func:`to_checksum_address` and so from
:meth:`ChecksumCodec.encode`. Validation never raises and reports malformed
input as ``False``. The CLI prints ``error: <message>`` on stderr and exits 1
when an address cannot be checksummed.
"""
from __future__ import annotations

import argparse
import sys
from typing import Iterable

from byte_utils import DecodeError, decode_hex
from keccak_primitives import DIGEST_SIZE, keccak256_hex

ADDRESS_LENGTH = 20
CHECKSUM_ADDRESS_LENGTH = 2 + 2 * ADDRESS_LENGTH

Address = bytes

_EIP55_VECTORS = (
    "0x52908400098527886E0F7030069857D2E4169EE7",
    "0x8617E340B3D01FA5F11F306F4090FD50E238070D",
    "0xde709f2102306220921060314715629080e2fb77",
    "0x27b1fdb04752bbc536007a920d24acb045561c26",
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
)


def to_checksum_address(raw: bytes) -> str:
    """Return the EIP-55 checksummed form of the raw address bytes *raw*.

    The Keccak-256 hash is taken over the lowercase hex *text* of the address,
    not the raw bytes. A letter is uppercased when the hash nibble at the same
    position is 8 or above; digits are never changed.

    Any input up to 32 bytes is accepted, so the scheme generalizes beyond
    20-byte addresses (an empty input yields ``"0x"``). Longer inputs have
    more hex digits than the hash has nibbles and raise ``ValueError``.
    """
    if len(raw) > DIGEST_SIZE:
        raise ValueError(
            f"cannot checksum {len(raw)} bytes, at most {DIGEST_SIZE} are supported"
        )
    lc = bytes(raw).hex()
    h = keccak256_hex(lc.encode("ascii"))
    out = []
    for i, c in enumerate(lc):
        if c in "abcdef" and int(h[i], 16) >= 8:
            out.append(c.upper())
        else:
            out.append(c)
    return "0x" + "".join(out)


def is_checksum_address(address: str) -> bool:
    """Check that *address* is a 20-byte address in its exact EIP-55 casing.

    Malformed input (wrong prefix, wrong length, non-hex digits) is reported as
    ``False`` rather than raised.
    """
    if not isinstance(address, str):
        return False
    if not address.startswith("0x") or len(address) != CHECKSUM_ADDRESS_LENGTH:
        return False
    try:
        raw = decode_hex(address[2:])
    except DecodeError:
        return False
    return to_checksum_address(raw) == address


def checksum_hex(addr: str) -> str:
    """Recompute the checksum casing for a hex address in any case.

    Accepts an optional ``0x``/``0X`` prefix. Raises :class:`DecodeError` for
    non-hex input and ``ValueError`` when it is not a 20-byte address.
    """
    if addr.startswith("0x") or addr.startswith("0X"):
        addr = addr[2:]
    raw = decode_hex(addr)
    if len(raw) != ADDRESS_LENGTH:
        raise ValueError(
            f"address must be {ADDRESS_LENGTH} bytes ({2 * ADDRESS_LENGTH} hex characters)"
        )
    return to_checksum_address(raw)


class ChecksumCodec:
    """Encode raw addresses to EIP-55 strings and validate candidates."""

    def encode(self, raw: Address) -> str:
        return to_checksum_address(raw)

    def validate(self, address: str) -> bool:
        return is_checksum_address(address)


def run_self_test() -> None:
    for vector in _EIP55_VECTORS:
        recomputed = checksum_hex(vector.lower())
        if recomputed != vector:
            raise RuntimeError(f"EIP-55 self-test failed: {recomputed} != {vector}")
        if not is_checksum_address(vector):
            raise RuntimeError(f"EIP-55 self-test rejected {vector}")


def _build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="EIP-55 address checksum utilities")
    sub = parser.add_subparsers(dest="command", required=True)

    checksum_parser = sub.add_parser("checksum", help="Emit the checksummed address")
    checksum_parser.add_argument("address", help="Address hex, optionally 0x-prefixed")

    validate_parser = sub.add_parser("validate", help="Check an address's checksum casing")
    validate_parser.add_argument("address", help="0x-prefixed address")

    sub.add_parser("self-test", help="Run EIP-55 test vectors")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_cli()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.command == "checksum":
        try:
            print(checksum_hex(args.address))
        except ValueError as exc:
            print("error:", exc, file=sys.stderr)
            return 1
        return 0
    if args.command == "validate":
        if is_checksum_address(args.address):
            print("valid")
            return 0
        print("invalid")
        return 1
    if args.command == "self-test":
        try:
            run_self_test()
        except RuntimeError as exc:
            print("error:", exc, file=sys.stderr)
            return 1
        print("ok")
        return 0
    parser.error("unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
