# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Case Frame Registry
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
The three SNePSLOG case-frame conventions.

Mode 1
    ``P(x1..xn)`` uses a frame ``{r, a1..an}``.
Mode 2
    ``P(x1..xn)`` uses ``{"rel P", "rel-arg#P1".."rel-arg#Pn"}``.
Mode 3
    Frames are declared up front with a name and a relation specification
    and cached by that name.  A leading ``nil`` means the frame has no
    relation for the predicate itself.

Modes 1 and 2 rely on the network's structural deduplication; only mode 3
keeps its own cache.  That cache is guarded by one lock around the whole
read-check-insert sequence.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from snepslog.network.structure import (
    PROPOSITION,
    CaseFrame,
    Network,
    Relation,
    Semantic,
)

from .terms import TermSyntaxError

logger = logging.getLogger(__name__)

MODE_ONE = 1
MODE_TWO = 2
MODE_THREE = 3
SUPPORTED_MODES = (MODE_ONE, MODE_TWO, MODE_THREE)

NIL = "nil"

RelationSpec = Union[str, Sequence[str]]


class CaseFrameNotFoundError(LookupError):
    """Raised when no mode-3 frame has been defined under a name."""


@dataclass(frozen=True)
class NamedCaseFrame:
    """A mode-3 frame with its relations in the order they were requested.

    The network shares one frame among definitions over the same relation
    set, so ``case_frame.relations`` may follow another definition's order.
    Wiring uses ``leading_relation`` and ``argument_relations`` instead.
    """

    name: str
    case_frame: CaseFrame
    leading_relation: Optional[Relation]
    argument_relations: Tuple[Relation, ...]

    @property
    def relation_names(self) -> List[str]:
        leading = [self.leading_relation.name] if self.leading_relation else []
        return leading + [r.name for r in self.argument_relations]


def parse_relation_spec(spec: RelationSpec) -> Tuple[Optional[str], List[str]]:
    """Split a relation specification into (leading relation, other relations).

    ``"(r1 r2 r3)"``, ``"[r1 r2 r3]"``, ``"r1 r2 r3"`` and ``["r1", "r2", "r3"]``
    are equivalent.  The leading entry is ``None`` when it is ``nil``.
    """
    if isinstance(spec, str):
        text = spec.strip()
        if len(text) >= 2 and text[0] in "([" and text[-1] in ")]":
            text = text[1:-1]
        tokens = text.split()
    else:
        tokens = [str(t).strip() for t in spec]
        if any(not t for t in tokens):
            raise TermSyntaxError(f"Empty relation name in specification {spec!r}")
    if not tokens:
        raise TermSyntaxError(f"Empty relation specification {spec!r}")
    leading: Optional[str] = None if tokens[0] == NIL else tokens[0]
    rest = tokens[1:]
    if leading is None and not rest:
        raise TermSyntaxError("A 'nil' specification must name at least one relation")
    return leading, rest


class CaseFrameRegistry:
    """Defines case frames for atomic terms under the three modes.

    Parameters
    ----------
    network : network the frames and their relations live in.
    """

    def __init__(self, network: Network) -> None:
        self.network = network
        self._named: Dict[str, NamedCaseFrame] = {}
        self._lock = threading.Lock()

    # ── Mode 1 ───────────────────────────────────────────────────────────────

    def mode_one_relations(self, arity: int) -> List[Relation]:
        """``[r, a1..aN]``, defining any that are missing."""
        if arity < 0:
            raise ValueError(f"arity must be >= 0, got {arity}")
        rels = [self.network.define_relation("r", PROPOSITION)]
        for k in range(1, arity + 1):
            rels.append(self.network.define_relation(f"a{k}", PROPOSITION))
        return rels

    def mode_one_frame(self, arity: int) -> CaseFrame:
        """``{r, a1..aN}`` over ``Proposition``."""
        return self.network.define_case_frame(
            PROPOSITION, self.mode_one_relations(arity)
        )

    # ── Mode 2 ───────────────────────────────────────────────────────────────

    def mode_two_relations(self, operator: str, arity: int) -> List[Relation]:
        if not operator:
            raise ValueError("Mode-2 frames need an operator name")
        if arity < 0:
            raise ValueError(f"arity must be >= 0, got {arity}")
        rels = [self.network.define_relation(f"rel {operator}", PROPOSITION)]
        for k in range(1, arity + 1):
            rels.append(
                self.network.define_relation(f"rel-arg#{operator}{k}", PROPOSITION)
            )
        return rels

    def mode_two_frame(self, operator: str, arity: int) -> CaseFrame:
        """``{"rel <op>", "rel-arg#<op>1".."rel-arg#<op>N"}`` over ``Proposition``."""
        return self.network.define_case_frame(
            PROPOSITION, self.mode_two_relations(operator, arity)
        )

    # ── Mode 3 ───────────────────────────────────────────────────────────────

    def mode_three_frame(
        self,
        semantic: Union[str, Semantic],
        name: str,
        relations: RelationSpec,
    ) -> CaseFrame:
        """Return the frame cached under *name*, defining it on the first call.

        Later calls ignore *semantic* and *relations*.  Raises
        ``RelationNotFoundError`` if a relation is unknown to the network and
        ``TermSyntaxError`` for an empty specification; the cache is left
        untouched in both cases.
        """
        return self.define_named(semantic, name, relations).case_frame

    def define_named(
        self,
        semantic: Union[str, Semantic],
        name: str,
        relations: RelationSpec,
    ) -> NamedCaseFrame:
        if not name:
            raise ValueError("Mode-3 frames need a name")
        with self._lock:
            cached = self._named.get(name)
            if cached is not None:
                return cached

            leading_name, rest = parse_relation_spec(relations)
            leading = (
                self.network.get_relation(leading_name)
                if leading_name is not None
                else None
            )
            arguments = tuple(self.network.get_relation(r) for r in rest)
            rels = ([leading] if leading is not None else []) + list(arguments)

            if isinstance(semantic, str):
                semantic = Semantic(semantic)
            frame = self.network.define_case_frame(semantic, rels, label=name)
            entry = NamedCaseFrame(name, frame, leading, arguments)
            self._named[name] = entry
        logger.info("Defined mode-3 case frame %s as %r", name, frame)
        return entry

    def named(self, name: str) -> NamedCaseFrame:
        try:
            return self._named[name]
        except KeyError:
            raise CaseFrameNotFoundError(
                f"No mode-3 case frame is defined for '{name}'."
            ) from None

    def get(self, name: str) -> Optional[CaseFrame]:
        entry = self._named.get(name)
        return entry.case_frame if entry is not None else None

    def clear(self) -> None:
        with self._lock:
            self._named.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._named

    def __len__(self) -> int:
        return len(self._named)
