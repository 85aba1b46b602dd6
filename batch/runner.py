"""Solving test cases: root selection, decoding and synthesis per case.

A failure in one case never stops the batch: run_case maps any SolverError
into a FAILED CaseResult, and run_batch fills one result slot per case.
"""

from dataclasses import dataclass
from enum import Enum

from core.decoder import decode
from core.errors import SolverError, InsufficientRoots
from core.polynomial import Polynomial
from batch.document import TestCase, RootEntry, parse_case


class CaseStatus(Enum):
    SOLVED = "solved"
    FAILED = "failed"


@dataclass(frozen=True)
class CaseSolution:
    n: int
    k: int
    degree: int
    roots: tuple[int, ...]
    polynomial: Polynomial


@dataclass(frozen=True)
class CaseResult:
    index: int
    status: CaseStatus
    solution: CaseSolution | None = None
    error: SolverError | None = None

    @property
    def ok(self) -> bool:
        return self.status is CaseStatus.SOLVED


def select_entries(case: TestCase) -> list[RootEntry]:
    """First `degree` present entries in key order 1..n.

    Entries past the first `degree` are ignored and never decoded.
    """
    candidates = [case.entries[key] for key in sorted(case.entries)]
    if len(candidates) < case.degree:
        raise InsufficientRoots(case.degree, len(candidates))
    return candidates[:case.degree]


def solve_case(case: TestCase) -> CaseSolution:
    roots = tuple(decode(e.base, e.value) for e in select_entries(case))
    return CaseSolution(case.n, case.k, case.degree, roots,
                        Polynomial.from_roots(roots))


def run_case(raw, index: int) -> CaseResult:
    """Parse and solve one raw test case (0-based index)."""
    try:
        solution = solve_case(parse_case(raw, index))
    except SolverError as e:
        return CaseResult(index, CaseStatus.FAILED, error=e)
    return CaseResult(index, CaseStatus.SOLVED, solution=solution)


def run_batch(raw_cases) -> list[CaseResult]:
    return [run_case(raw, i) for i, raw in enumerate(raw_cases)]
