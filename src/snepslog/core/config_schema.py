# ─────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Configuration Schema
# © 1998–2026 Miroslav Šotek. All rights reserved.
# ─────────────────────────────────────────────────────────────────────
"""
Session settings shared between the command layer and the term compiler.

The command layer reads and writes ``mode`` and ``printing_mode`` freely;
assignment is not validated.  The compiler checks the mode when it needs it.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_MODE = "SNEPSLOG_MODE"
ENV_PRINTING_MODE = "SNEPSLOG_PRINTING_MODE"

PRINTING_MODES = ("normal", "expert", "unlabeled")


class SnepslogSettings(BaseModel):
    model_config = ConfigDict(extra='allow')

    mode: int = Field(default=1)
    printing_mode: str = "normal"
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str):
        return v.upper()


def settings_from_env(
    environ: Optional[Mapping[str, str]] = None, **overrides
) -> SnepslogSettings:
    """Build settings from ``SNEPSLOG_*`` variables; explicit *overrides* win."""
    env = os.environ if environ is None else environ
    raw: dict = {}
    mode = env.get(ENV_MODE, "").strip()
    if mode:
        raw["mode"] = mode
    printing_mode = env.get(ENV_PRINTING_MODE, "").strip()
    if printing_mode:
        raw["printing_mode"] = printing_mode
    raw.update({k: v for k, v in overrides.items() if v is not None})
    return SnepslogSettings.model_validate(raw)
