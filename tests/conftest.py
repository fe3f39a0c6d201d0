"""Shared test fixtures."""

from __future__ import annotations

import pytest

from jpencoding.config import DetectionConfig

# "Hello 日本語 text" in each encoding.  日本語 is 93FA 967B 8CEA in
# Shift_JIS and C6FC CBDC B8EC in EUC-JP.
SJIS_TEXT = "Hello 日本語 text".encode("shift_jis")
EUC_TEXT = "Hello 日本語 text".encode("euc_jp")

# "あ " repeated: the 0x82 trail of あ followed by a space is a malformed
# Shift_JIS pair, and 0xE3 0x81 is a malformed EUC-JP pair.
UTF8_TEXT = ("あ " * 3 + "end").encode("utf-8")


@pytest.fixture
def strict_config() -> DetectionConfig:
    return DetectionConfig(max_decoding_failures=0)


@pytest.fixture
def sjis_file(tmp_path):
    """A file with 10 ASCII bytes followed by Shift_JIS kanji."""
    path = tmp_path / "sjis.txt"
    path.write_bytes(b"a" * 10 + "日本語".encode("shift_jis"))
    return path
