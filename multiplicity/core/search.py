"""
The least-witness search over the naturals.

find(P) = the least n with P(n), or TOP if there is none.

Scanning n = 0, 1, 2, ... only terminates when a witness exists, so the
search is backed by an oracle that decides existence up front:

    exists_fn() is False  -> TOP, P is never evaluated
    exists_fn() is True   -> scan until the witness turns up

With no oracle the caller has to bound the scan with max_steps. Running
out of steps without a witness proves nothing, and raises
UndecidedSearchError rather than guessing TOP.

The scan is a step loop over a SearchState, so callers (certificates,
the CLI trace) can inspect every predicate evaluation afterwards.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from .enat import ENat, TOP


class UndecidedSearchError(RuntimeError):
    """A bounded search ran out of steps with no oracle to fall back on."""


@dataclass
class SearchState:
    """
    State of one least-witness search.

    n:          next candidate to test
    found:      the witness, once found
    history:    one entry per predicate evaluation
    no_witness: the oracle ruled out any witness
    """
    n: int = 0
    found: Optional[int] = None
    history: list = field(default_factory=list)
    step: int = 0
    halted: bool = False
    halt_reason: str = ""
    no_witness: bool = False

    @property
    def result(self) -> ENat:
        if self.found is not None:
            return ENat.of(self.found)
        if self.no_witness:
            return TOP
        raise UndecidedSearchError(
            f"no witness among n < {self.n} and no oracle to decide the rest "
            f"({self.halt_reason or 'search not run'})"
        )

    def to_dict(self):
        return {
            "n": self.n,
            "found": self.found,
            "history": self.history,
            "step": self.step,
            "halted": self.halted,
            "halt_reason": self.halt_reason,
            "no_witness": self.no_witness,
        }


def search_step(
    state: SearchState,
    pred: Callable,
    verbose: bool = True,
) -> SearchState:
    """Evaluate the predicate at the current candidate and advance."""
    if state.halted:
        return state

    n = state.n
    state.step += 1
    holds = bool(pred(n))
    state.history.append({"step": state.step, "n": n, "holds": holds})

    if verbose:
        print(f"  [step {state.step}] P({n}) = {holds}")

    if holds:
        state.found = n
        state.halted = True
        state.halt_reason = "witness found"
    else:
        state.n += 1
    return state


def run_search(
    state: SearchState,
    pred: Callable,
    exists_fn: Optional[Callable] = None,
    max_steps: Optional[int] = None,
    verbose: bool = True,
) -> SearchState:
    """
    Run the search until a witness is found, the oracle rules one out,
    or max_steps predicate evaluations have been spent.

    Args:
        state:      initial state (usually SearchState())
        pred:       pred(n) -> bool
        exists_fn:  exists_fn() -> bool; decides whether a witness exists
        max_steps:  safety limit; None means unbounded (oracle required)
        verbose:    print each step
    """
    if exists_fn is None and max_steps is None:
        raise ValueError("an unbounded search needs an existence oracle (exists_fn)")

    if exists_fn is not None and not state.halted and not exists_fn():
        state.halted = True
        state.no_witness = True
        state.halt_reason = "oracle: no witness exists"
        if verbose:
            print("  [oracle] no witness exists -> ∞")
        return state

    while not state.halted:
        if max_steps is not None and state.step >= max_steps:
            state.halted = True
            state.halt_reason = f"max_steps ({max_steps}) reached"
            if verbose:
                print(f"  [safety valve] {state.halt_reason}")
            break
        state = search_step(state, pred, verbose=verbose)
    return state


def nat_find(
    pred: Callable,
    exists_fn: Optional[Callable] = None,
    max_steps: Optional[int] = None,
    verbose: bool = False,
) -> ENat:
    """
    The least n with pred(n), as an ENat; TOP if the oracle says none exists.

    Raises UndecidedSearchError when a bounded search finds nothing.
    """
    state = run_search(SearchState(), pred, exists_fn=exists_fn,
                       max_steps=max_steps, verbose=verbose)
    return state.result
