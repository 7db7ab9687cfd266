#!/usr/bin/env python3
"""Run the Keccak, HMAC and EIP-55 self-tests in one go."""
import sys

import byte_utils
import eip55
import keccak_primitives


def main() -> int:
    for module in (keccak_primitives, byte_utils, eip55):
        try:
            module.run_self_test()
        except RuntimeError as exc:
            print(f"self-test failed: {exc}", file=sys.stderr)
            return 1
    print("ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
