"""Read-only exercise -> solution mapping shared by all submitters."""

import logging
from collections.abc import Mapping
from typing import Iterable, Iterator, List, Protocol

from ..client.models import Exercise


logger = logging.getLogger(__name__)


class ExerciseFetcher(Protocol):
    def fetch_exercise(self, exercise_id: str) -> Exercise:
        ...


class Generator(Protocol):
    def generate(self, exercise: Exercise) -> str:
        ...


class SolutionTable(Mapping):
    """
    Immutable mapping from exercise id to solution code.
    The input is copied on construction; there are no mutators, so a table
    can be read from any number of threads without locking.
    """

    def __init__(self, solutions=()):
        self._solutions = dict(solutions)

    def __getitem__(self, exercise_id: str) -> str:
        return self._solutions[exercise_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._solutions)

    def __len__(self) -> int:
        return len(self._solutions)

    def __repr__(self) -> str:
        return f"SolutionTable({list(self._solutions)!r})"


def unique_ids(exercise_ids: Iterable[str]) -> List[str]:
    """Drop repeated ids, keeping first-seen order."""
    return list(dict.fromkeys(exercise_ids))


def build_solution_table(
    exercise_ids: Iterable[str], fetcher: ExerciseFetcher, generator: Generator
) -> SolutionTable:
    """Fetch and solve every exercise once, then publish the table.

    The first FetchError, ParseError or GenerationError propagates and no
    table is returned.
    """
    solutions = {}
    for exercise_id in unique_ids(exercise_ids):
        exercise = fetcher.fetch_exercise(exercise_id)
        solutions[exercise_id] = generator.generate(exercise)

    logger.info("Solved %d exercise(s)", len(solutions))
    return SolutionTable(solutions)
