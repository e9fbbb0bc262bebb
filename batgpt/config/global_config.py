"""Global configuration management (API key and student accounts)."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import click

from ..client.models import Account
from ..exceptions import ConfigError


APP_NAME = "batgpt"
CONFIG_ENV = "BATGPT_CONFIG"


def default_config_path() -> Path:
    """Return the config location, honouring the BATGPT_CONFIG override."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override)
    return Path(click.get_app_dir(APP_NAME)) / "config.json"


@dataclass
class GlobalConfig:
    """
    Global configuration storing the OpenAI key and the student accounts.
    Stored as JSON in the per-user application directory.
    """

    openai_key: str = ""
    students: List[Account] = field(default_factory=list)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlobalConfig":
        """Load global config from file, or defaults if there is none yet."""
        if path is None:
            path = default_config_path()

        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls(
                openai_key=data.get("openai_key", ""),
                students=[
                    Account(cuname=s["cuname"], password=s["pass"])
                    for s in data.get("students", [])
                ],
            )
        except (json.JSONDecodeError, OSError, KeyError, TypeError, AttributeError) as e:
            raise ConfigError(f"Could not read config {path}: {e}") from e

    def save(self, path: Optional[Path] = None) -> None:
        """Save global config to file."""
        if path is None:
            path = default_config_path()

        data = {
            "openai_key": self.openai_key,
            "students": [{"cuname": s.cuname, "pass": s.password} for s in self.students],
        }
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Could not write config {path}: {e}") from e

    def add_student(self, cuname: str, password: str) -> None:
        """Append an account. Duplicates are kept."""
        self.students.append(Account(cuname=cuname, password=password))

    def remove_student(self, cuname: str) -> int:
        """Drop every account named ``cuname`` and return how many were removed."""
        kept = [s for s in self.students if s.cuname != cuname]
        removed = len(self.students) - len(kept)
        self.students = kept
        return removed

    def set_key(self, key: str) -> None:
        self.openai_key = key

    def has_key(self) -> bool:
        """Check if an API key is stored."""
        return bool(self.openai_key)
