"""Concurrent submission of cached solutions across accounts."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..client.client import CodingBatClient
from ..client.models import Account
from ..client.session import SessionManager
from ..exceptions import SubmissionError
from .table import SolutionTable


logger = logging.getLogger(__name__)


@dataclass
class SubmissionOutcome:
    """Result of one (account, exercise) unit of work."""

    account: Account
    exercise_id: str
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class DispatchReport:
    """All outcomes of a dispatch, in dispatch order."""

    outcomes: List[SubmissionOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> List[SubmissionOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[SubmissionOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


class SubmissionDispatcher:
    """Logs every account in, then submits every solution for every account."""

    def __init__(self, session_manager: SessionManager, max_workers: Optional[int] = None):
        """
        max_workers caps the number of submissions in flight.
        None means one worker per (account, exercise) pair.
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.session_manager = session_manager
        self.max_workers = max_workers

    def dispatch(self, table: SolutionTable, accounts: Sequence[Account]) -> DispatchReport:
        """Submit every solution in ``table`` for every account.

        Logins happen first, one account at a time; an AuthError aborts before
        anything is submitted. Submissions then run concurrently and are all
        joined. If any failed, SubmissionError is raised with the full report
        attached and the first failure as its cause.
        """
        sessions: List[Tuple[Account, CodingBatClient]] = []
        try:
            for account in accounts:
                sessions.append((account, self.session_manager.open(account)))
            report = self._submit_all(table, sessions)
        finally:
            for _, client in sessions:
                client.session.close()

        failed = report.failed
        if failed:
            raise SubmissionError(
                f"{len(failed)} of {len(report.outcomes)} submission(s) failed", report
            ) from failed[0].error
        return report

    def _submit_all(
        self, table: SolutionTable, sessions: Sequence[Tuple[Account, CodingBatClient]]
    ) -> DispatchReport:
        units = [
            (account, client, exercise_id)
            for account, client in sessions
            for exercise_id in table
        ]
        report = DispatchReport()
        if not units:
            return report

        workers = self.max_workers or len(units)
        logger.info("Submitting %d solution(s) with %d worker(s)", len(units), workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(client.submit, exercise_id, table[exercise_id], account.cuname)
                for account, client, exercise_id in units
            ]
            # Joins every unit; a failure does not cancel the others
            for (account, _, exercise_id), future in zip(units, futures):
                error = future.exception()
                if error is not None:
                    logger.error("%s / %s: %s", account.cuname, exercise_id, error)
                report.outcomes.append(SubmissionOutcome(account, exercise_id, error))

        return report
