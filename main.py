"""Polynomial coefficients from base-encoded roots: entry point.

Usage: python main.py [input.json] [computed_coeffs.json]

Reads test cases from the input document, builds the monic polynomial for
each case from its first k-1 roots and writes the coefficients (as decimal
text) to the output document. A failing case is reported and skipped.
"""

import sys
from pathlib import Path

from core.errors import DocumentError
from batch.document import read_document
from batch.metrics import BatchMetrics
from batch.report import build_output, write_output, print_summary, print_failure
from batch.runner import run_case


DEFAULT_INPUT = "input.json"
DEFAULT_OUTPUT = "computed_coeffs.json"


def solve_document(input_path, output_path) -> BatchMetrics:
    """Solve every case of input_path and write the solved ones to output_path."""
    tests = read_document(input_path)

    metrics = BatchMetrics()
    metrics.start()
    results = []
    for i, raw in enumerate(tests):
        print(f"Processing Test Case {i + 1} ... ", end="", flush=True)
        result = run_case(raw, i)
        metrics.record(result)
        results.append(result)
        if result.ok:
            print("done.")
            print_summary(result)
        else:
            print("failed.")
            print_failure(result)
    metrics.stop()

    write_output(output_path, build_output(results))
    print(f"\nWrote computed coefficients to: {output_path}")
    return metrics


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    input_path = Path(argv[0]) if len(argv) > 0 else Path.cwd() / DEFAULT_INPUT
    output_path = Path(argv[1]) if len(argv) > 1 else Path.cwd() / DEFAULT_OUTPUT

    try:
        metrics = solve_document(input_path, output_path)
    except DocumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\n--- Metrics ---")
    print(f"  Cases solved: {metrics.solved}")
    print(f"  Cases failed: {metrics.failed}")
    print(f"  Time: {metrics.elapsed:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
