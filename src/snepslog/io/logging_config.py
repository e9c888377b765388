# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Structured Logging Configuration
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

class SnepslogJSONFormatter(logging.Formatter):
    """
    JSON Formatter for the SNePSLOG compiler.
    Encodes log records as structured machine-readable JSON.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        # Term being compiled, passed as extra={"term_context": {...}}
        if hasattr(record, "term_context"):
            log_data["term_context"] = record.term_context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)

def setup_snepslog_logging(
    level: int = logging.INFO,
    json_output: bool = True,
    log_file: str | None = None
) -> None:
    """
    Initializes structured logging for the ``snepslog`` logger tree.
    """
    root_logger = logging.getLogger("snepslog")
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console Handler (stderr keeps stdout for compiled output)
    console_handler = logging.StreamHandler(sys.stderr)
    if json_output:
        console_handler.setFormatter(SnepslogJSONFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(
            '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'
        ))
    root_logger.addHandler(console_handler)

    # Optional File Handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(SnepslogJSONFormatter() if json_output else logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        root_logger.addHandler(file_handler)

    root_logger.debug("Structured logging initialized", extra={"term_context": {"json": json_output}})
