"""Editor configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "RAWEDIT_"

DEFAULT_TAB_WIDTH = 4
DEFAULT_ERROR_PADDING = 50


def _env_int(env: Mapping[str, str], key: str, fallback: int, minimum: int) -> int:
    """Integer setting from ``env``; unparsable or too-small values fall back."""

    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed >= minimum else fallback


@dataclass
class EditorConfig:
    """Tunables shared by the dispatcher, the loop and the CLI."""

    tab_width: int = DEFAULT_TAB_WIDTH
    error_padding_lines: int = DEFAULT_ERROR_PADDING
    log_preset: Optional[str] = None

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            raise ValueError("tab_width must be positive")
        if self.error_padding_lines < 0:
            raise ValueError("error_padding_lines cannot be negative")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if env is None else env
        return cls(
            tab_width=_env_int(source, "TAB_WIDTH", DEFAULT_TAB_WIDTH, 1),
            error_padding_lines=_env_int(
                source, "ERROR_PADDING", DEFAULT_ERROR_PADDING, 0
            ),
            log_preset=source.get(f"{ENV_PREFIX}LOG_PRESET") or None,
        )
