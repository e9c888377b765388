# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Connective Cardinality Encoding
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Cardinality encoding of boolean connectives.

Seven connectives reduce to two frame shapes, each carrying a lower and an
upper bound on the number of true arguments:

    connective   shape    lower   upper
    and          andOr    k       k
    or           andOr    1       k
    nand         andOr    0       k-1
    nor          andOr    0       0
    xor          andOr    1       1
    iff          thresh   1       k-1
    equality     thresh   1       1      (binary only)

Bounds are wired to base nodes under the reserved ``Infimum`` tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from snepslog.network.structure import INFIMUM, CaseFrame, Network, Node, Wire

from .frames import DefaultFrames
from .terms import Connective


class FrameShape(Enum):
    """Structural shape of a cardinality frame: (lower, upper) relation names."""

    AND_OR = ("min", "max")
    THRESH = ("thresh", "threshMax")

    @property
    def lower_relation(self) -> str:
        return self.value[0]

    @property
    def upper_relation(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Cardinality:
    """A (lower, upper) true-count constraint; ``upper=None`` means unbounded."""

    shape: FrameShape
    lower: int
    upper: Optional[int]


_Bound = Callable[[int], int]

_CONNECTIVE_TABLE: Mapping[Connective, Tuple[FrameShape, _Bound, _Bound]] = MappingProxyType({
    Connective.AND: (FrameShape.AND_OR, lambda k: k, lambda k: k),
    Connective.OR: (FrameShape.AND_OR, lambda k: 1, lambda k: k),
    Connective.NAND: (FrameShape.AND_OR, lambda k: 0, lambda k: k - 1),
    Connective.NOR: (FrameShape.AND_OR, lambda k: 0, lambda k: 0),
    Connective.XOR: (FrameShape.AND_OR, lambda k: 1, lambda k: 1),
    Connective.IFF: (FrameShape.THRESH, lambda k: 1, lambda k: k - 1),
    Connective.EQUALITY: (FrameShape.THRESH, lambda k: 1, lambda k: 1),
})


def encode_connective(connective: Connective, k: int) -> Cardinality:
    """Return the cardinality constraint of *connective* over *k* arguments."""
    if k < 1:
        raise ValueError(f"'{connective.value}' needs at least one argument, got {k}")
    if connective is Connective.EQUALITY and k != 2:
        raise ValueError(f"equality is binary, got {k} arguments")
    try:
        shape, lower, upper = _CONNECTIVE_TABLE[connective]
    except KeyError:
        raise ValueError(f"Unknown connective {connective!r}") from None
    return Cardinality(shape, lower(k), upper(k))


class ConnectiveEncoder:
    """Turns cardinality constraints into frames and bound wires.

    Parameters
    ----------
    network : network the bound base nodes are built in.
    frames : default frames installed in *network*.
    """

    def __init__(self, network: Network, frames: DefaultFrames) -> None:
        self.network = network
        self.frames = frames

    def frame_for(self, shape: FrameShape) -> CaseFrame:
        return self.frames.and_or if shape is FrameShape.AND_OR else self.frames.thresh

    def infix_frame_for(self, shape: FrameShape) -> CaseFrame:
        if shape is FrameShape.AND_OR:
            return self.frames.infix_and_or
        return self.frames.infix_thresh

    def bound_node(self, value: int) -> Node:
        return self.network.build_base_node(str(value), INFIMUM)

    def bound_wires(self, cardinality: Cardinality) -> List[Wire]:
        """Upper then lower bound wire; no upper wire when it is unbounded."""
        shape = cardinality.shape
        wires: List[Wire] = []
        if cardinality.upper is not None:
            wires.append(
                Wire(
                    self.frames.relation(shape.upper_relation),
                    self.bound_node(cardinality.upper),
                )
            )
        wires.append(
            Wire(
                self.frames.relation(shape.lower_relation),
                self.bound_node(cardinality.lower),
            )
        )
        return wires

    def arg_wires(self, args: Sequence[Node]) -> List[Wire]:
        arg = self.frames.relation("arg")
        return [Wire(arg, node) for node in args]

    def encode(
        self, connective: Connective, args: Sequence[Node]
    ) -> Tuple[CaseFrame, List[Wire]]:
        """Frame and wires for *connective* applied to the argument set *args*."""
        cardinality = encode_connective(connective, len(args))
        return self.bounded(cardinality, args)

    def bounded(
        self, cardinality: Cardinality, args: Sequence[Node]
    ) -> Tuple[CaseFrame, List[Wire]]:
        """Frame and wires for explicit bounds, as in ``andor``/``thresh`` terms."""
        wires = self.arg_wires(args) + self.bound_wires(cardinality)
        return self.frame_for(cardinality.shape), wires
