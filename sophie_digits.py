"""Long-division digit extraction for the decimal expansion of 1/q.

The whole generator state is the remainder r (0 <= r < q), starting at 1.
Each step emits floor(10*r / q) and keeps (10*r) mod q. Exact integers only.
"""

from __future__ import annotations

from collections.abc import Iterator

from sophie_model import U64, NumericDomain


class DigitStream:
    def __init__(self, q: int, domain: NumericDomain = U64) -> None:
        if q < 2 or not domain.fits(q):
            raise ValueError(f"DigitStream: q={q} must be in [2..{domain.num_max}]")
        self.q = q
        self.domain = domain
        self.remainder = 1

    def next_digit(self) -> int:
        step = self.domain.widening_mul(self.remainder, 10)
        digit, self.remainder = divmod(step, self.q)
        return digit

    def take(self, n: int) -> str:
        """Next n digits as a string."""
        if n < 0:
            raise ValueError("take: n must be non-negative")
        return "".join(chr(ord("0") + self.next_digit()) for _ in range(n))

    def observation(self, digits: int) -> str:
        return "0." + self.take(digits)

    def observations(self, count: int, digits: int) -> Iterator[str]:
        # one continuous stream: no reset between observations
        for _ in range(count):
            yield self.observation(digits)


__all__ = ["DigitStream"]
