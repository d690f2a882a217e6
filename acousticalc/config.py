"""Runtime settings for the acousticalc CLI.

Read from ACOUSTICALC_* environment variables; command-line options
override whatever is found here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PROMPT = "calc> "

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Resolved CLI settings."""

    prompt: str = DEFAULT_PROMPT
    verbose: bool = False


def _env_flag(env: Mapping[str, str], key: str) -> bool:
    return env.get(key, "").strip().lower() in _TRUTHY


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ (tests).
    """
    env = os.environ if environ is None else environ
    return Settings(
        prompt=env.get("ACOUSTICALC_PROMPT", DEFAULT_PROMPT),
        verbose=_env_flag(env, "ACOUSTICALC_VERBOSE"),
    )
