# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — IO Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Descriptor loading and structured logging."""

from .logging_config import SnepslogJSONFormatter, setup_snepslog_logging
from .term_loader import Descriptor, descriptor_from_dict, load_descriptors

__all__ = [
    "SnepslogJSONFormatter",
    "setup_snepslog_logging",
    "Descriptor",
    "descriptor_from_dict",
    "load_descriptors",
]
