"""Application configuration via environment variables.

Naming convention:
  OS_*    — Server-level settings
  DICT_*  — Pronunciation dictionary loading and lookup policy

The property names of the original dictionary configuration (DICTIONARY,
FILLER_PATH, ...) still work but log deprecation warnings on startup.
"""

from __future__ import annotations

import logging
import os

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# Map: new_env_name -> old_env_name
_DEPRECATED_ENV_MAP: dict[str, str] = {
    "DICT_WORD_PATH": "DICTIONARY",
    "DICT_FILLER_PATH": "FILLER_PATH",
    "DICT_ADD_SIL_ENDING_PRONUNCIATION": "ADD_SIL_ENDING_PRONUNCIATION",
    "DICT_WORD_REPLACEMENT": "WORD_REPLACEMENT",
    "DICT_ALLOW_MISSING_WORDS": "ALLOW_MISSING_WORDS",
    "DICT_CREATE_MISSING_WORDS": "CREATE_MISSING_WORDS",
}


def _check_deprecated_env_vars() -> dict[str, str]:
    """Check for deprecated env var names and return warnings.

    If old name is set and new name isn't, copies old -> new in os.environ
    so pydantic picks it up.
    """
    warnings: dict[str, str] = {}
    for new_name, old_name in _DEPRECATED_ENV_MAP.items():
        old_val = os.environ.get(old_name)
        if old_val is not None:
            if os.environ.get(new_name) is None:
                os.environ[new_name] = old_val
            warnings[old_name] = new_name
    return warnings


def log_deprecation_warnings(warnings: dict[str, str]) -> None:
    """Log deprecation warnings for old env var names."""
    for old_name, new_name in sorted(warnings.items()):
        logger.warning(
            "Deprecated env var '%s' — use '%s' instead. "
            "Old names will be removed in a future release.",
            old_name,
            new_name,
        )


# Check before Settings is instantiated so values are in os.environ
_deprecation_warnings = _check_deprecated_env_vars()


class Settings(BaseSettings):
    """pronlex settings — HTTP server and dictionary configuration."""

    # ── Server (OS_ prefix) ──────────────────────────────────────────────────
    os_host: str = "0.0.0.0"
    os_port: int = 8200
    os_api_key: str = ""
    os_log_level: str = "INFO"
    os_cors_origins: str = "*"

    # ── Dictionary sources ───────────────────────────────────────────────────
    dict_word_path: str = ""
    dict_filler_path: str = ""
    dict_addenda: str = ""
    dict_preload: bool = True

    # ── Lookup policy ────────────────────────────────────────────────────────
    dict_add_sil_ending_pronunciation: bool = False
    dict_word_replacement: str = ""
    dict_allow_missing_words: bool = False
    dict_create_missing_words: bool = False

    @property
    def dict_addenda_list(self) -> list[str]:
        return [a.strip() for a in self.dict_addenda.split(",") if a.strip()]

    @property
    def dict_configured(self) -> bool:
        return bool(self.dict_word_path and self.dict_filler_path)

    model_config = {"env_prefix": "", "case_sensitive": False, "extra": "ignore"}


settings = Settings()

# Log deprecation warnings after settings are created
if _deprecation_warnings:
    log_deprecation_warnings(_deprecation_warnings)
