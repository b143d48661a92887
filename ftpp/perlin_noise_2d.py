"""Two-dimensional Perlin noise."""

from __future__ import annotations

import math
import random

from ftpp.random_2d_coordinate_generator import Random2DCoordinateGenerator

_SIZE = 256


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float) -> float:
    h = hash_value & 0xF
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = 0.0
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


class PerlinNoise2D:
    """Samples smooth gradient noise in [-1, 1]; the same seed gives the same noise."""

    def __init__(self, seed: int = 42) -> None:
        generated = Random2DCoordinateGenerator(seed)(0, _SIZE - 1)
        # Remainder truncated toward zero, keeping the sign of the generated value.
        engine_seed = abs(generated) % _SIZE
        if generated < 0:
            engine_seed = -engine_seed
        table = list(range(_SIZE))
        random.Random(engine_seed).shuffle(table)
        self._permutation = table + table

    def sample(self, x: float, y: float) -> float:
        """The noise value at ``(x, y)``; zero at every integer coordinate."""
        floor_x = math.floor(x)
        floor_y = math.floor(y)
        cell_x = floor_x & 255
        cell_y = floor_y & 255
        x -= floor_x
        y -= floor_y

        u = _fade(x)
        v = _fade(y)

        perm = self._permutation
        aa = perm[perm[cell_x] + cell_y]
        ab = perm[perm[cell_x] + cell_y + 1]
        ba = perm[perm[cell_x + 1] + cell_y]
        bb = perm[perm[cell_x + 1] + cell_y + 1]

        return _lerp(
            v,
            _lerp(u, _grad(aa, x, y), _grad(ba, x - 1, y)),
            _lerp(u, _grad(ab, x, y - 1), _grad(bb, x - 1, y - 1)),
        )