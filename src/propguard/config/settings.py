"""Library settings — env vars and explicit overrides in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the embedding application
  2. Env vars     — ``PROPGUARD_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class PropguardSettings(BaseSettings):
    """Settings controlling propguard's own diagnostics.

    Attributes:
        verbose: Emit DEBUG records from the ``propguard`` loggers.
        log_json: Render log records as JSON lines instead of console text.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PROPGUARD_",
    }

    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> PropguardSettings:
        """Read env vars, letting non-None *overrides* win."""
        return cls(**{name: value for name, value in overrides.items() if value is not None})
