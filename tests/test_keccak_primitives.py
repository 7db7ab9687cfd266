"""Tests for the Keccak-256 primitives."""

import hashlib

import pytest

import keccak_primitives
from keccak_primitives import DIGEST_SIZE, keccak256, keccak256_hex, run_self_test


class TestKeccak256:
    def test_empty_input_digest(self) -> None:
        assert keccak256_hex(b"") == (
            "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
        )

    def test_abc_digest(self) -> None:
        assert keccak256(b"abc").hex() == (
            "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"
        )

    @pytest.mark.parametrize("data", [b"", b"\x00", b"abc", b"\xa3" * 200, b"x" * 1000])
    def test_digest_is_always_32_bytes(self, data: bytes) -> None:
        assert len(keccak256(data)) == DIGEST_SIZE == 32

    def test_differs_from_nist_sha3(self) -> None:
        """Legacy Keccak padding must not match the standardized SHA3-256."""
        assert keccak256(b"abc") != hashlib.sha3_256(b"abc").digest()

    def test_accepts_bytearray(self) -> None:
        assert keccak256(bytearray(b"abc")) == keccak256(b"abc")

    def test_hex_is_lowercase(self) -> None:
        digest = keccak256_hex(b"quick")
        assert digest == digest.lower()
        assert len(digest) == 64


class TestSelfTest:
    def test_canonical_vectors_pass(self) -> None:
        run_self_test()

    def test_mismatch_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(keccak_primitives, "keccak256_hex", lambda data: "00" * 32)
        with pytest.raises(RuntimeError, match="empty"):
            run_self_test()


class TestCli:
    def test_keccak_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert keccak_primitives.main(["keccak", "0x616263"]) == 0
        assert capsys.readouterr().out.strip() == (
            "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"
        )

    def test_keccak_command_empty_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert keccak_primitives.main(["keccak", "0x"]) == 0
        assert capsys.readouterr().out.strip() == keccak256_hex(b"")

    def test_keccak_command_bad_hex(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert keccak_primitives.main(["keccak", "0xzz"]) == 1
        assert capsys.readouterr().err.startswith("error:")

    def test_self_test_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert keccak_primitives.main(["self-test"]) == 0
        assert capsys.readouterr().out.strip() == "ok"

    def test_self_test_command_reports_mismatch(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(keccak_primitives, "keccak256_hex", lambda data: "00" * 32)
        assert keccak_primitives.main(["self-test"]) == 1
        assert "Keccak-256 self-test failed" in capsys.readouterr().err

    def test_unknown_command_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            keccak_primitives.main(["vectors"])
        assert excinfo.value.code == 2

    def test_missing_command_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            keccak_primitives.main([])
        assert excinfo.value.code == 2
