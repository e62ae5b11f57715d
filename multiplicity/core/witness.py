"""
Witnesses for a multiplicity result.

A finite result m is backed by two facts: a^m | b and a^(m+1) does not.
These utilities turn a search into something a caller can re-check:

    decompose   b = a^m * c with a not dividing c
    certify     the chain a^0 | b, a^1 | b, ..., a^(m+1) does not divide b,
                read back from the search history
"""

from dataclasses import dataclass, field
from typing import Any

from .carrier import Carrier
from .enat import ENat, NotFiniteError
from .query import resolve_carrier, search_multiplicity


@dataclass
class Decomposition:
    """b = divisor^exponent * cofactor, and divisor does not divide cofactor."""
    divisor: Any
    dividend: Any
    exponent: int
    cofactor: Any

    def verify(self, carrier: Carrier) -> bool:
        rebuilt = carrier.mul(carrier.pow(self.divisor, self.exponent), self.cofactor)
        return rebuilt == self.dividend and not carrier.divides(self.divisor, self.cofactor)


def decompose(a, b, carrier=None) -> Decomposition:
    """
    Split off the full power of a from b.

    Raises NotFiniteError when multiplicity(a, b) is infinite, and
    ValueError when the carrier has no exact division.
    """
    c = resolve_carrier(a, b, carrier)
    if c.div is None:
        raise ValueError(f"carrier {c.name!r} has no exact division; cannot extract a cofactor")
    m = search_multiplicity(a, b, c).result
    if m.is_top:
        raise NotFiniteError(
            f"multiplicity({c.show(a)}, {c.show(b)}) is infinite; no cofactor exists"
        )
    exponent = m.get()
    cofactor = c.div(b, c.pow(a, exponent))
    return Decomposition(divisor=a, dividend=b, exponent=exponent, cofactor=cofactor)


@dataclass
class Certificate:
    """
    The divisibility chain behind a multiplicity result.

    steps:   [(k, a^k divides b), ...] for k = 0 .. m+1 when finite
    verdict: how the search ended ("witness found", "oracle: ...")
    """
    divisor: Any
    dividend: Any
    result: ENat
    carrier: Carrier
    steps: list = field(default_factory=list)
    verdict: str = ""

    @property
    def name(self):
        c = self.carrier
        return f"multiplicity({c.show(self.divisor)}, {c.show(self.dividend)}) = {self.result}"

    def verify(self) -> bool:
        """Recompute every divisibility in the chain, plus its shape."""
        c = self.carrier
        for k, divides in self.steps:
            if c.pow_dvd(self.divisor, k, self.dividend) != divides:
                return False
        if self.result.is_top:
            return not self.steps
        m = self.result.get()
        expected = [(k, k <= m) for k in range(m + 2)]
        return self.steps == expected

    def to_dict(self):
        c = self.carrier
        return {
            "carrier": c.name,
            "divisor": c.show(self.divisor),
            "dividend": c.show(self.dividend),
            "result": self.result.to_dict(),
            "steps": [[k, d] for k, d in self.steps],
            "verdict": self.verdict,
        }

    def __repr__(self):
        return f"Certificate({self.name})"


def certify(a, b, carrier=None, verbose: bool = False) -> Certificate:
    """Run the search and keep its history as a checkable chain."""
    c = resolve_carrier(a, b, carrier)
    state = search_multiplicity(a, b, c, verbose=verbose)
    result = state.result

    steps = []
    if result.is_finite:
        # P(n) is "a^(n+1) does not divide b"; a^0 = 1 divides everything.
        steps.append((0, True))
        for entry in state.history:
            steps.append((entry["n"] + 1, not entry["holds"]))

    return Certificate(
        divisor=a, dividend=b, result=result, carrier=c,
        steps=steps, verdict=state.halt_reason,
    )


def print_certificate(cert: Certificate):
    """Pretty-print the divisibility chain."""
    c = cert.carrier
    a, b = c.show(cert.divisor), c.show(cert.dividend)
    print(f"\n{'='*60}")
    print(f"CERTIFICATE: {cert.name}")
    print(f"{'='*60}")
    if cert.result.is_top:
        print(f"  {cert.verdict}")
        print(f"  every power of {a} divides {b}")
    else:
        for k, divides in cert.steps:
            mark = "|" if divides else "∤"
            print(f"  {k+1}. ({a})^{k} {mark} {b}")
    print(f"{'='*60}")
    if cert.result.is_finite:
        m = cert.result.get()
        print(f"  QED: ({a})^{m} divides {b} and ({a})^{m+1} does not -> multiplicity is {m}.")
    else:
        print("  QED: oracle rules out a last power -> multiplicity is ∞.")
