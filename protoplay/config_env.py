"""Helpers for loading project environment configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .models import DiceConfig, load_dice_config

_TRUTHY = ("1", "true", "yes", "on")


def env_files(directory: Path) -> List[Path]:
    """The dotenv files that apply to ``directory``, in load order.

    The nearest ``.env`` (searching upwards) comes first, then ``.env.local``
    in ``directory`` itself if present.
    """
    found: List[Path] = []
    for parent in (directory, *directory.parents):
        candidate = parent / ".env"
        if candidate.is_file():
            found.append(candidate)
            break
    local_file = directory / ".env.local"
    if local_file.is_file():
        found.append(local_file)
    return found


def load_env(directory: Optional[Path] = None) -> List[Path]:
    """Load dotenv files for ``directory`` (default: cwd) without overriding process env.

    Returns the files that were loaded.
    """
    files = env_files(directory or Path.cwd())
    for path in files:
        load_dotenv(path, override=False)
    return files


def dice_config_from_env(**overrides: Any) -> DiceConfig:
    """Build a ``DiceConfig``. Precedence: explicit override > env > defaults."""
    data: Dict[str, Any] = {}
    if os.getenv("PROTOPLAY_SIDES"):
        data["sides"] = os.environ["PROTOPLAY_SIDES"]
    if os.getenv("PROTOPLAY_GENERATOR"):
        data["generator"] = os.environ["PROTOPLAY_GENERATOR"]
    if os.getenv("PROTOPLAY_SEED"):
        data["seed"] = os.environ["PROTOPLAY_SEED"]
    fair = os.getenv("PROTOPLAY_FAIR")
    if fair is not None:
        data["fair"] = fair.strip().lower() in _TRUTHY
    data.update({k: v for k, v in overrides.items() if v is not None})
    return load_dice_config(data)
