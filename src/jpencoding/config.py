"""Detection configuration."""

from __future__ import annotations

import dataclasses

#: Default number of malformed sequences a candidate may accumulate.
DEFAULT_MAX_DECODING_FAILURES: int = 3

#: Default number of leading bytes read from a stream or file.
DEFAULT_CHECK_BYTES: int = 65_536

#: Upper bound on bytes read when ``check_bytes`` is 0 (whole source).
MAX_CHECK_BYTES: int = 2**31 - 1


def _validate_non_negative(name: str, value: int) -> None:
    """Raise ValueError if *value* is not a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{name} must be a non-negative integer"
        raise ValueError(msg)


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionConfig:
    """Settings for a single detection call.

    :param max_decoding_failures: Malformed sequences tolerated per candidate
        encoding.  ``0`` makes detection strict.
    :param check_bytes: Leading bytes to read from a stream or file.  ``0``
        reads the whole source.
    """

    max_decoding_failures: int = DEFAULT_MAX_DECODING_FAILURES
    check_bytes: int = DEFAULT_CHECK_BYTES

    def __post_init__(self) -> None:
        _validate_non_negative("max_decoding_failures", self.max_decoding_failures)
        _validate_non_negative("check_bytes", self.check_bytes)

    def replace(self, **changes: int) -> DetectionConfig:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = DetectionConfig()
