# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Default Case Frames
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Built-in relations and case frames the term compiler selects from.

Connective shapes::

    andOr        {arg*, max, min}
    thresh       {arg*, thresh, threshMax}
    infixAndOr   {a1, a2, max, min}
    infixThresh  {a1, a2, thresh, threshMax}

Entailments::

    andRule        {andAnt*, cq*}
    numericalRule  {andAnt*, cq*, i}
    orRule         {ant*, cq*}        (OrEntailment and Implication)

SNeRE frames are keyed by tag in :data:`SNERE_FRAME_TABLE`; act frames by
arity in :data:`snepslog.compiler.arity.ACT_FRAME_TABLE`.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from snepslog.network.structure import (
    ACT,
    ACTION,
    ENTITY,
    INFIMUM,
    PROPOSITION,
    CaseFrame,
    Network,
    Relation,
    Semantic,
)

from .arity import ACT_FRAME_TABLE
from .terms import SnereTag


RELATION_SEMANTICS: Mapping[str, Semantic] = MappingProxyType({
    # Connectives
    "arg": PROPOSITION,
    "a1": PROPOSITION,
    "a2": PROPOSITION,
    "min": INFIMUM,
    "max": INFIMUM,
    "thresh": INFIMUM,
    "threshMax": INFIMUM,
    # Entailments
    "andAnt": PROPOSITION,
    "ant": PROPOSITION,
    "cq": PROPOSITION,
    "i": INFIMUM,
    # SNeRE
    "iff": PROPOSITION,
    "when": PROPOSITION,
    "whenever": PROPOSITION,
    "doo": ACT,
    "act": ACT,
    "plan": ACT,
    "effect": PROPOSITION,
    "goal": PROPOSITION,
    "precondition": PROPOSITION,
    # Acts
    "action": ACTION,
    "obj": ENTITY,
    **{f"obj{k}": ENTITY for k in range(1, 11)},
})


@dataclass(frozen=True)
class SnereFrameSpec:
    label: str
    first: str
    second: str


SNERE_FRAME_TABLE: Mapping[SnereTag, SnereFrameSpec] = MappingProxyType({
    SnereTag.IFDO: SnereFrameSpec("doIf", "iff", "doo"),
    SnereTag.WHENDO: SnereFrameSpec("whenDo", "when", "doo"),
    SnereTag.WHENEVERDO: SnereFrameSpec("wheneverDo", "whenever", "doo"),
    SnereTag.ACT_PLAN: SnereFrameSpec("planAct", "act", "plan"),
    SnereTag.EFFECT: SnereFrameSpec("actEffect", "act", "effect"),
    SnereTag.GOAL_PLAN: SnereFrameSpec("planGoal", "goal", "plan"),
    SnereTag.PRECONDITION: SnereFrameSpec("preconditionAct", "act", "precondition"),
})


@dataclass(frozen=True)
class DefaultFrames:
    """Handles to the built-in frames of one network."""

    relations: Mapping[str, Relation]
    and_or: CaseFrame
    thresh: CaseFrame
    infix_and_or: CaseFrame
    infix_thresh: CaseFrame
    and_rule: CaseFrame
    numerical_rule: CaseFrame
    or_rule: CaseFrame
    snere: Mapping[SnereTag, CaseFrame]
    act: Mapping[int, CaseFrame]

    def relation(self, name: str) -> Relation:
        return self.relations[name]


def install_default_frames(network: Network) -> DefaultFrames:
    """Define the built-in relations and frames in *network* (idempotent)."""
    rels: Dict[str, Relation] = {
        name: network.define_relation(name, semantic)
        for name, semantic in RELATION_SEMANTICS.items()
    }

    def frame(label: str, semantic: Semantic, names: Tuple[str, ...]) -> CaseFrame:
        return network.define_case_frame(
            semantic, [rels[n] for n in names], label=label
        )

    snere = {
        tag: frame(spec.label, PROPOSITION, (spec.first, spec.second))
        for tag, spec in SNERE_FRAME_TABLE.items()
    }
    act = {
        arity: frame(spec.label, ACT, spec.relation_names)
        for arity, spec in ACT_FRAME_TABLE.items()
    }

    return DefaultFrames(
        relations=MappingProxyType(rels),
        and_or=frame("andOrRule", PROPOSITION, ("arg", "max", "min")),
        thresh=frame("threshRule", PROPOSITION, ("arg", "thresh", "threshMax")),
        infix_and_or=frame("infixAndOr", PROPOSITION, ("a1", "a2", "max", "min")),
        infix_thresh=frame(
            "infixThresh", PROPOSITION, ("a1", "a2", "thresh", "threshMax")
        ),
        and_rule=frame("andRule", PROPOSITION, ("andAnt", "cq")),
        numerical_rule=frame("numericalRule", PROPOSITION, ("andAnt", "cq", "i")),
        or_rule=frame("orRule", PROPOSITION, ("ant", "cq")),
        snere=MappingProxyType(snere),
        act=MappingProxyType(act),
    )
