"""A subtractive pseudo-random number generator with a reproducible sequence."""

from __future__ import annotations

import time

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_MSEED = 161803398
_SCALE = 4.6566128752457969e-10


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer with two's-complement wrap."""
    return ((value + 2**31) % 2**32) - 2**31


class Random:
    """Subtractive generator.

    Every draw rebuilds the seed table from the current seed and then stores
    the drawn value as the new seed, so the sequence depends only on the seed.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.monotonic_ns() // 1_000_000
        self._seed = _wrap32(seed)

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        self._seed = _wrap32(value)

    @staticmethod
    def _build_table(seed: int) -> list[int]:
        table = [0] * 56
        num = _INT_MAX if seed == _INT_MIN else abs(seed)
        num2 = _MSEED - num
        table[55] = num2
        num3 = 1
        for i in range(1, 55):
            index = 21 * i % 55
            table[index] = num3
            num3 = _wrap32(num2 - num3)
            if num3 < 0:
                num3 += _INT_MAX
            num2 = table[index]
        for _ in range(4):
            for k in range(1, 56):
                value = _wrap32(table[k] - table[1 + (k + 30) % 55])
                if value < 0:
                    value += _INT_MAX
                table[k] = value
        return table

    def next(self) -> int:
        """A non-negative integer below 2**31 - 1."""
        table = self._build_table(self._seed)
        # The table is freshly built, so the draw always pairs slots 1 and 22.
        value = _wrap32(table[1] - table[22])
        if value == _INT_MAX:
            value -= 1
        if value < 0:
            value += _INT_MAX
        self._seed = value
        return value

    def next_double(self) -> float:
        """A floating-point value between 0.0 and 1.0."""
        num = self.next()
        if self.next() % 2 == 0:
            num = -num
        return (num + 2147483646.0) / 4294967293.0

    def next_range(self, min_value: int, max_value: int) -> int:
        """An integer from ``min_value`` up to but excluding ``max_value``.

        Equal bounds, or a minimum above the maximum, give ``min_value``.
        """
        if min_value == max_value:
            return min_value
        if min_value > max_value:
            max_value = min_value
        span = max_value - min_value
        if span <= _INT_MAX:
            return int(float(self.next()) * _SCALE * float(span)) + min_value
        return _wrap32(int(self.next_double() * float(span)) + min_value)