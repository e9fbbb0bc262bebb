"""End-to-end solve pipeline: fetch, generate, then submit for every account."""

import logging
from typing import Iterable, Optional, Sequence

from ..client.client import BASE_URL, CodingBatClient
from ..client.models import Account
from ..client.session import SessionManager
from .dispatcher import DispatchReport, SubmissionDispatcher
from .generator import DEFAULT_MODEL, SolutionGenerator
from .table import ExerciseFetcher, Generator, build_solution_table


logger = logging.getLogger(__name__)


def solve(
    exercise_ids: Iterable[str],
    accounts: Sequence[Account],
    api_key: str = "",
    base_url: str = BASE_URL,
    model: str = DEFAULT_MODEL,
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None,
    fetcher: Optional[ExerciseFetcher] = None,
    generator: Optional[Generator] = None,
    session_manager: Optional[SessionManager] = None,
) -> DispatchReport:
    """Solve every exercise once and submit the solutions for every account.

    Every solution is generated before the first login, so a fetch, parse
    or generation failure means nothing was submitted.
    """
    fetcher = fetcher or CodingBatClient(base_url=base_url, timeout=timeout)
    generator = generator or SolutionGenerator(api_key, model=model, timeout=timeout)
    table = build_solution_table(exercise_ids, fetcher, generator)

    session_manager = session_manager or SessionManager(base_url=base_url, timeout=timeout)
    dispatcher = SubmissionDispatcher(session_manager, max_workers=max_workers)
    logger.info("Submitting for %d account(s)", len(accounts))
    return dispatcher.dispatch(table, accounts)
