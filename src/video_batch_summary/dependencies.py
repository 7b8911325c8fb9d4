from __future__ import annotations

import os
import shutil
from typing import Iterable

from .errors import MissingCredentialError, MissingDependenciesError

API_KEY_ENV = "OPENAI_API_KEY"
SUMMARIZER_EXECUTABLE = "llm"
REQUIRED_EXECUTABLES: tuple[str, ...] = ("ffmpeg", SUMMARIZER_EXECUTABLE)


def check_executables(names: Iterable[str] = REQUIRED_EXECUTABLES) -> None:
    """Raise ``MissingDependenciesError`` naming every executable not on ``PATH``."""

    missing = [name for name in names if shutil.which(name) is None]
    if missing:
        raise MissingDependenciesError(missing)


def check_credential(env_var: str = API_KEY_ENV) -> str:
    value = os.getenv(env_var, "").strip()
    if not value:
        raise MissingCredentialError(f"{env_var} is not set")
    return value
