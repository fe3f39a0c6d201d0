from __future__ import annotations

import dataclasses

import pytest

from jpencoding.config import DEFAULT_CONFIG, DetectionConfig


def test_defaults():
    assert DEFAULT_CONFIG.max_decoding_failures == 3
    assert DEFAULT_CONFIG.check_bytes == 65_536
    assert DetectionConfig() == DEFAULT_CONFIG


def test_zero_is_allowed():
    config = DetectionConfig(max_decoding_failures=0, check_bytes=0)
    assert config.max_decoding_failures == 0
    assert config.check_bytes == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_decoding_failures": -1},
        {"check_bytes": -1},
        {"max_decoding_failures": True},
        {"check_bytes": 1.5},
        {"max_decoding_failures": "3"},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError, match="non-negative integer"):
        DetectionConfig(**kwargs)


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.max_decoding_failures = 0


def test_replace_returns_new_config():
    strict = DEFAULT_CONFIG.replace(max_decoding_failures=0)
    assert strict.max_decoding_failures == 0
    assert strict.check_bytes == DEFAULT_CONFIG.check_bytes
    assert DEFAULT_CONFIG.max_decoding_failures == 3


def test_replace_validates():
    with pytest.raises(ValueError):
        DEFAULT_CONFIG.replace(check_bytes=-5)
