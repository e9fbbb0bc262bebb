"""Exception hierarchy for batgpt."""

from typing import Optional


class BatGptError(Exception):
    """Base class for every error raised by batgpt."""


class ConfigError(BatGptError):
    """The persisted configuration could not be read or written."""


class FetchError(BatGptError):
    """An exercise page could not be retrieved."""


class ParseError(BatGptError):
    """An exercise page did not contain the expected markup."""


class GenerationError(BatGptError):
    """The completion service did not produce a usable solution."""


class AuthError(BatGptError):
    """The login request for an account could not be sent."""


class SubmissionError(BatGptError):
    """One or more submit requests could not be completed.

    When raised by the dispatcher, ``report`` holds the outcome of every
    unit of work and ``__cause__`` is the first failure.
    """

    def __init__(self, message: str, report=None):
        super().__init__(message)
        self.report = report

    @property
    def first_error(self) -> Optional[BaseException]:
        return self.__cause__
