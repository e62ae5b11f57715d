"""
Extended natural numbers: N with a top element.

Multiplicity lives here. A finite value n means "a^n divides b and
a^(n+1) does not"; TOP means "every power of a divides b".

    ENat.of(3)      -> 3
    TOP             -> ∞

Order is total: every finite value sits below TOP.
Addition saturates: TOP + x = TOP.
Scaling by a natural keeps 0 * TOP = 0, so that the multiplicity of
b^0 = 1 stays 0 whatever b is.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional


class NotFiniteError(ValueError):
    """Raised when a finite value is requested from TOP."""


def _is_nat_like(x) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


@total_ordering
@dataclass(frozen=True, eq=False)
class ENat:
    """A natural number, or TOP (value is None)."""
    value: Optional[int] = None

    @classmethod
    def of(cls, n: int) -> 'ENat':
        if not _is_nat_like(n) or n < 0:
            raise ValueError(f"ENat.of expects a natural number, got {n!r}")
        return cls(n)

    @classmethod
    def top(cls) -> 'ENat':
        return TOP

    @property
    def is_finite(self) -> bool:
        return self.value is not None

    @property
    def is_top(self) -> bool:
        return self.value is None

    def get(self) -> int:
        """The underlying natural. Only valid once finiteness is known."""
        if self.value is None:
            raise NotFiniteError("value is infinite; there is no natural number to extract")
        return self.value

    def get_or(self, default):
        return default if self.value is None else self.value

    def _key(self):
        return (1, 0) if self.value is None else (0, self.value)

    @staticmethod
    def _coerce(other) -> Optional['ENat']:
        if isinstance(other, ENat):
            return other
        if _is_nat_like(other):
            # negative ints compare below every ENat
            return ENat(other)
        return None

    def __eq__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self.value == o.value

    def __hash__(self):
        return hash(self.value)

    def __lt__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._key() < o._key()

    def __add__(self, other):
        o = self._coerce(other)
        if o is None or (o.value is not None and o.value < 0):
            return NotImplemented
        if self.value is None or o.value is None:
            return TOP
        return ENat(self.value + o.value)

    __radd__ = __add__

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None or (o.value is not None and o.value < 0):
            return NotImplemented
        if self.value == 0 or o.value == 0:
            return ENat(0)
        if self.value is None or o.value is None:
            return TOP
        return ENat(self.value * o.value)

    __rmul__ = __mul__

    def __str__(self):
        return "∞" if self.value is None else str(self.value)

    def __repr__(self):
        return f"ENat({self})"

    def to_dict(self):
        return {"finite": self.is_finite, "value": self.value}

    @classmethod
    def from_dict(cls, d):
        if not d.get("finite", d.get("value") is not None):
            return TOP
        return cls.of(d["value"])


TOP = ENat(None)
