"""Data models for CodingBat entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Exercise:
    """A fetched exercise page."""

    exercise_id: str
    statement: str
    starter_code: str


@dataclass(frozen=True)
class Account:
    """A registered CodingBat login."""

    cuname: str
    password: str
