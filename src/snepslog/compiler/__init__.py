# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Term Compiler Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Term-to-network compilation.

``terms``        closed union of term descriptors
``connectives``  cardinality encoding of boolean connectives
``registry``     the three case-frame modes (mode 3 cached by name)
``arity``        the closed act arity table
``compiler``     ``TermCompiler`` dispatch
"""

from .arity import MAX_ACT_ARITY, UnsupportedArityError, act_frame_spec
from .compiler import TermCompiler
from .connectives import Cardinality, ConnectiveEncoder, FrameShape, encode_connective
from .frames import DefaultFrames, install_default_frames
from .registry import CaseFrameNotFoundError, CaseFrameRegistry, NamedCaseFrame
from .terms import (
    ActTerm,
    AndOrTerm,
    AtomicTerm,
    Connective,
    Entailment,
    EntailmentKind,
    FrameDefinition,
    InfixedTerm,
    NegatedTerm,
    RelationDefinition,
    SetTerm,
    SnereTag,
    SnereTerm,
    Term,
    TermSyntaxError,
    ThreshTerm,
)

__all__ = [
    # Arity dispatch
    "MAX_ACT_ARITY",
    "UnsupportedArityError",
    "act_frame_spec",
    # Compiler
    "TermCompiler",
    # Connectives
    "Cardinality",
    "ConnectiveEncoder",
    "FrameShape",
    "encode_connective",
    # Frames
    "DefaultFrames",
    "install_default_frames",
    "CaseFrameNotFoundError",
    "CaseFrameRegistry",
    "NamedCaseFrame",
    # Terms
    "ActTerm",
    "AndOrTerm",
    "AtomicTerm",
    "Connective",
    "Entailment",
    "EntailmentKind",
    "FrameDefinition",
    "InfixedTerm",
    "NegatedTerm",
    "RelationDefinition",
    "SetTerm",
    "SnereTag",
    "SnereTerm",
    "Term",
    "TermSyntaxError",
    "ThreshTerm",
]
