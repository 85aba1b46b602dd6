"""Batch orchestration: input document, per-case solving, reporting, metrics."""

from batch.document import RootEntry, TestCase, read_document, parse_case
from batch.runner import (CaseStatus, CaseSolution, CaseResult,
                          select_entries, solve_case, run_case, run_batch)
from batch.report import build_output, write_output, solution_record
from batch.metrics import BatchMetrics
