# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
SNePSLOG Term Compiler
======================

Compiles parsed SNePSLOG terms into molecular nodes of a SNePS semantic
network.

``network``
    In-memory graph store: relations, case frames, base and molecular nodes.

``compiler``
    Connective encoding, the three case-frame modes, arity dispatch and the
    ``TermCompiler`` that ties them together.
"""

__version__ = "1.0.0"
