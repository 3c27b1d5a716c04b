"""Runtime configuration read from the environment.

The CLI loads a ``.env`` file first, so values there behave like exported
variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _i(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _s(name: str, default: str) -> str:
    return os.getenv(name) or default


def _log_level() -> str:
    level = _s("LINEAGE_SEARCH_LOG_LEVEL", "WARNING").upper()
    return level if level in _LEVELS else "WARNING"


@dataclass(frozen=True)
class SearchConfig:
    # Payload the CLI loads when --data is not given
    data_path: Path = field(default_factory=lambda: Path(_s("LINEAGE_SEARCH_DATA_PATH", "genealogy_graph.json")))

    # Ancestor count above which an ancestry view degrades to parents only
    ancestry_limit: int = field(default_factory=lambda: _i("LINEAGE_SEARCH_ANCESTRY_LIMIT", 1000))

    log_level: str = field(default_factory=_log_level)


def load_config() -> SearchConfig:
    """Load configuration, honouring a ``.env`` file in the working directory."""
    from dotenv import load_dotenv

    load_dotenv()
    return SearchConfig()
