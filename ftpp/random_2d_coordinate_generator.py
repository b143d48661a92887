"""Deterministic pseudo-random numbers from a seed and a 2D coordinate."""

from __future__ import annotations

_MULTIPLIER = 25214903917
_INCREMENT = 11
_MASK = (1 << 64) - 1
_SIGN = 1 << 63


def _to_int64(value: int) -> int:
    """Wrap ``value`` into the signed 64-bit range."""
    value &= _MASK
    return value - (1 << 64) if value & _SIGN else value


class Random2DCoordinateGenerator:
    """Maps a coordinate to a number that depends only on it and the seed.

    Arithmetic wraps around as signed 64-bit integers.
    """

    def __init__(self, seed: int = 42) -> None:
        self._seed = _to_int64(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def __call__(self, x: int, y: int) -> int:
        mixed = self._seed ^ _to_int64(x) ^ _to_int64(y)
        return _to_int64(mixed * _MULTIPLIER + _INCREMENT)