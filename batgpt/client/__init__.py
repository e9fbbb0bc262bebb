"""Client module for CodingBat interaction."""

from .client import BASE_URL, CodingBatClient
from .models import Account, Exercise
from .parser import CodingBatPageParser, ExercisePageParser
from .session import SessionManager

__all__ = [
    "BASE_URL",
    "CodingBatClient",
    "Account",
    "Exercise",
    "CodingBatPageParser",
    "ExercisePageParser",
    "SessionManager",
]
