"""Solution generation and submission."""

from .dispatcher import DispatchReport, SubmissionDispatcher, SubmissionOutcome
from .generator import DEFAULT_MODEL, SolutionGenerator
from .pipeline import solve
from .table import SolutionTable, build_solution_table

__all__ = [
    "DispatchReport",
    "SubmissionDispatcher",
    "SubmissionOutcome",
    "DEFAULT_MODEL",
    "SolutionGenerator",
    "solve",
    "SolutionTable",
    "build_solution_table",
]
