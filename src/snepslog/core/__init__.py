# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Core Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from .config_schema import SnepslogSettings, settings_from_env

__all__ = ["SnepslogSettings", "settings_from_env"]
