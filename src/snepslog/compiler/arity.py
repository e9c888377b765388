# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Act Arity Dispatch
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Closed arity table for act nodes.

An act ``a(x1, ..., xn)`` is built on one of exactly ten fixed case frames,
selected by the number of flattened objects.  Every frame carries the
``action`` relation.  Arity 0 and arities above :data:`MAX_ACT_ARITY` have
no frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

MAX_ACT_ARITY = 10
ACTION_RELATION = "action"


class UnsupportedArityError(ValueError):
    """Raised for act terms with no objects or more than ``MAX_ACT_ARITY``."""


@dataclass(frozen=True)
class ActFrameSpec:
    """Frame label and object relation names for one act arity."""

    label: str
    object_relations: Tuple[str, ...]

    @property
    def relation_names(self) -> Tuple[str, ...]:
        return (ACTION_RELATION,) + self.object_relations


ACT_FRAME_TABLE: Mapping[int, ActFrameSpec] = MappingProxyType({
    1: ActFrameSpec("act", ("obj",)),
    2: ActFrameSpec("act1", ("obj1", "obj2")),
    3: ActFrameSpec("act2", ("obj1", "obj2", "obj3")),
    4: ActFrameSpec("act3", ("obj1", "obj2", "obj3", "obj4")),
    5: ActFrameSpec("act4", ("obj1", "obj2", "obj3", "obj4", "obj5")),
    6: ActFrameSpec("act5", ("obj1", "obj2", "obj3", "obj4", "obj5", "obj6")),
    7: ActFrameSpec(
        "act6", ("obj1", "obj2", "obj3", "obj4", "obj5", "obj6", "obj7")
    ),
    8: ActFrameSpec(
        "act7", ("obj1", "obj2", "obj3", "obj4", "obj5", "obj6", "obj7", "obj8")
    ),
    9: ActFrameSpec(
        "act8",
        ("obj1", "obj2", "obj3", "obj4", "obj5", "obj6", "obj7", "obj8", "obj9"),
    ),
    10: ActFrameSpec(
        "act9",
        (
            "obj1", "obj2", "obj3", "obj4", "obj5",
            "obj6", "obj7", "obj8", "obj9", "obj10",
        ),
    ),
})

if sorted(ACT_FRAME_TABLE) != list(range(1, MAX_ACT_ARITY + 1)):
    raise RuntimeError("ACT_FRAME_TABLE must cover arities 1..MAX_ACT_ARITY exactly.")


def act_frame_spec(arity: int) -> ActFrameSpec:
    """Return the frame spec for *arity*, or raise ``UnsupportedArityError``."""
    try:
        return ACT_FRAME_TABLE[arity]
    except KeyError:
        raise UnsupportedArityError(
            f"Act terms take 1..{MAX_ACT_ARITY} objects, got {arity}."
        ) from None
