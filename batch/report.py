"""Result records, console summaries and the output document.

Every integer that can grow without bound is written as decimal text.
"""

import json
import sys
from pathlib import Path

from batch.runner import CaseSolution, CaseResult

# Below CPython's default int -> str digit limit (4300).
_CHUNK_DIGITS = 4000
_CHUNK = 10 ** _CHUNK_DIGITS


def decimal_text(v: int) -> str:
    """Decimal text of any int, without the interpreter's digit limit.

    Large values are split in two around a power of ten near half their
    digit count and each half is converted on its own.
    """
    if v < 0:
        return "-" + decimal_text(-v)
    if v < _CHUNK:
        return str(v)
    half = v.bit_length() * 30103 // 200000
    hi, lo = divmod(v, 10 ** half)
    return decimal_text(hi) + decimal_text(lo).zfill(half)


def solution_record(solution: CaseSolution) -> dict:
    poly = solution.polynomial
    return {
        "n": solution.n,
        "k": solution.k,
        "degree": solution.degree,
        "usedRoots": [decimal_text(r) for r in solution.roots],
        "coeffs_low_to_high": [decimal_text(c) for c in poly.low_to_high],
        "coeffs_high_to_low": [decimal_text(c) for c in poly.high_to_low],
        "constant_c": decimal_text(poly.constant),
    }


def build_output(results: list[CaseResult]) -> dict:
    """Output document keyed testcase1, testcase2, ... (solved cases only)."""
    return {f"testcase{r.index + 1}": solution_record(r.solution)
            for r in results if r.ok}


def write_output(path, doc: dict):
    Path(path).write_text(json.dumps(doc, indent=2), encoding='utf-8')


def print_summary(result: CaseResult, out=None):
    """Print the summary block of a solved case."""
    out = out or sys.stdout
    s = result.solution
    print(f"\n--- Test Case {result.index + 1} summary ---", file=out)
    print(f"n = {s.n}, k = {s.k}, degree = {s.degree}", file=out)
    print("Used roots (decimal):", file=out)
    for i, r in enumerate(s.roots, 1):
        print(f" r{i}: {decimal_text(r)}", file=out)
    print("Coefficients (highest -> constant):", file=out)
    print(" ".join(decimal_text(c) for c in s.polynomial.high_to_low), file=out)
    print(f"Constant c = {decimal_text(s.polynomial.constant)}", file=out)
    print("-" * 30, file=out)


def print_failure(result: CaseResult, err=None):
    err = err or sys.stderr
    print(f"Testcase {result.index + 1} error: {result.error}", file=err)
