# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Semantic Network Structure
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
In-memory SNePS network: relations, case frames, base and molecular nodes.

Pure Python + numpy + scipy.

The network owns node identity.  Base nodes are interned per
(literal, semantic) pair and molecular nodes per (case frame, wire set), so
building the same structure twice returns the same node.  The wire topology
can be exported as a sparse incidence matrix:

    W : (n_molecular, n_nodes)  number of wires from molecular row to node
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

import numpy as np
from scipy import sparse  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)


class RelationNotFoundError(LookupError):
    """Raised when a relation name is not defined in the network."""


class CaseFrameMismatchError(ValueError):
    """Raised when a wire set does not fit the case frame it is built with."""


# ── Semantic types and relations ─────────────────────────────────────────────


@dataclass(frozen=True)
class Semantic:
    """Semantic category of a node or of the values a relation accepts."""

    name: str


PROPOSITION = Semantic("Proposition")
ENTITY = Semantic("Entity")
ACT = Semantic("Act")
ACTION = Semantic("Action")
# Reserved tag for cardinality markers (min, max, thresh, threshMax, i).
INFIMUM = Semantic("Infimum")


@dataclass(frozen=True)
class Relation:
    """A labelled slot, typed by the semantic category it accepts."""

    name: str
    semantic: Semantic = PROPOSITION


@dataclass(frozen=True, eq=False)
class CaseFrame:
    """Semantic type plus an ordered tuple of uniquely named relations.

    Frames compare by identity; :attr:`key` is the structural signature the
    network uses for deduplication.
    """

    semantic: Semantic
    relations: Tuple[Relation, ...]
    label: Optional[str] = None

    def __post_init__(self) -> None:
        names = [r.name for r in self.relations]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate relation names in case frame: {names}")

    @property
    def relation_names(self) -> List[str]:
        return [r.name for r in self.relations]

    @property
    def key(self) -> Tuple[str, FrozenSet[str]]:
        return (self.semantic.name, frozenset(self.relation_names))

    def has_relation(self, relation: Relation) -> bool:
        return relation in self.relations

    def __repr__(self) -> str:
        label = self.label or "CaseFrame"
        return f"{label}({self.semantic.name}: {' '.join(self.relation_names)})"


# ── Nodes and wires ──────────────────────────────────────────────────────────


class _NodeKind(Enum):
    BASE = auto()
    MOLECULAR = auto()


@dataclass(frozen=True)
class Wire:
    """A (relation, node) pair attached to one molecular node."""

    relation: Relation
    node: "Node"

    def __repr__(self) -> str:
        return f"{self.relation.name}:{self.node.name}"


@dataclass(eq=False)
class Node:
    """A network node.  Compared by identity; created only by ``Network``."""

    id: int
    name: str
    semantic: Semantic
    kind: _NodeKind
    case_frame: Optional[CaseFrame] = None
    wires: Tuple[Wire, ...] = field(default_factory=tuple)

    @property
    def is_molecular(self) -> bool:
        return self.kind is _NodeKind.MOLECULAR

    @property
    def is_base(self) -> bool:
        return self.kind is _NodeKind.BASE

    def nodes_at(self, relation_name: str) -> List["Node"]:
        """Nodes reached through wires labelled *relation_name*, in wire order."""
        return [w.node for w in self.wires if w.relation.name == relation_name]

    def __repr__(self) -> str:
        return self.name


# ── Network ──────────────────────────────────────────────────────────────────


class Network:
    """In-memory semantic network with interning of frames and nodes.

    Usage::

        net = Network()
        member = net.define_relation("member", ENTITY)
        cls = net.define_relation("class", ENTITY)
        frame = net.define_case_frame(PROPOSITION, [member, cls])
        m1 = net.build_molecular_node(frame, [
            Wire(member, net.build_base_node("Fido")),
            Wire(cls, net.build_base_node("Dog")),
        ])

    All mutating calls hold one re-entrant lock, so terms may be compiled
    against a shared network from several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

        # Ordered registries -------------------------------------------------
        self._relations: Dict[str, Relation] = {}
        self._case_frames: List[CaseFrame] = []
        self._frame_index: Dict[Tuple[str, FrozenSet[str]], CaseFrame] = {}

        self._nodes: List[Node] = []
        self._molecular: List[Node] = []

        # Interning tables ---------------------------------------------------
        self._base_index: Dict[Tuple[str, Semantic], Node] = {}
        self._molecular_index: Dict[
            Tuple[CaseFrame, Tuple[Tuple[str, int], ...]], Node
        ] = {}

    # ── Relations ────────────────────────────────────────────────────────────

    def define_relation(
        self, name: str, semantic: Semantic = PROPOSITION
    ) -> Relation:
        """Define a relation, or return the existing one with that name."""
        if not name:
            raise ValueError("Relation name must be a non-empty string.")
        with self._lock:
            existing = self._relations.get(name)
            if existing is not None:
                return existing
            relation = Relation(name, semantic)
            self._relations[name] = relation
            logger.debug("Defined relation %s (%s)", name, semantic.name)
            return relation

    def get_relation(self, name: str) -> Relation:
        try:
            return self._relations[name]
        except KeyError:
            raise RelationNotFoundError(
                f"Relation '{name}' is not defined in the network."
            ) from None

    def has_relation(self, name: str) -> bool:
        return name in self._relations

    # ── Case frames ──────────────────────────────────────────────────────────

    def define_case_frame(
        self,
        semantic: Semantic,
        relations: Sequence[Relation],
        label: Optional[str] = None,
    ) -> CaseFrame:
        """Return the frame with this structure, defining it on first use.

        Every relation must already be defined in the network.
        """
        if not relations:
            raise ValueError("A case frame needs at least one relation.")
        for relation in relations:
            if self._relations.get(relation.name) != relation:
                raise RelationNotFoundError(
                    f"Relation '{relation.name}' is not defined in the network."
                )
        frame = CaseFrame(semantic, tuple(relations), label)
        with self._lock:
            existing = self._frame_index.get(frame.key)
            if existing is not None:
                return existing
            self._frame_index[frame.key] = frame
            self._case_frames.append(frame)
        logger.debug("Defined case frame %r", frame)
        return frame

    def owns_case_frame(self, frame: CaseFrame) -> bool:
        return self._frame_index.get(frame.key) is frame

    # ── Nodes ────────────────────────────────────────────────────────────────

    def build_base_node(self, literal: str, semantic: Semantic = ENTITY) -> Node:
        """Return the base node for *literal* under *semantic*, creating it once."""
        literal = str(literal).strip()
        if not literal:
            raise ValueError("Base node literal must be a non-empty string.")
        with self._lock:
            node = self._base_index.get((literal, semantic))
            if node is None:
                node = Node(len(self._nodes), literal, semantic, _NodeKind.BASE)
                self._nodes.append(node)
                self._base_index[(literal, semantic)] = node
            return node

    def build_molecular_node(
        self, case_frame: CaseFrame, wires: Sequence[Wire]
    ) -> Node:
        """Build (or fetch) the molecular node for *case_frame* and *wires*.

        Raises ``CaseFrameMismatchError`` when the frame is foreign to this
        network, the wire set is empty, a wire's relation is not a member of
        the frame, or a wire points at a node owned by another network.
        """
        if not self.owns_case_frame(case_frame):
            raise CaseFrameMismatchError(
                f"Case frame {case_frame!r} is not defined in this network."
            )
        if not wires:
            raise CaseFrameMismatchError("A molecular node needs at least one wire.")
        for wire in wires:
            if not case_frame.has_relation(wire.relation):
                raise CaseFrameMismatchError(
                    f"Relation '{wire.relation.name}' is not part of {case_frame!r}."
                )
            if not self._owns_node(wire.node):
                raise CaseFrameMismatchError(
                    f"Node '{wire.node.name}' does not belong to this network."
                )

        signature = tuple(sorted((w.relation.name, w.node.id) for w in wires))
        with self._lock:
            node = self._molecular_index.get((case_frame, signature))
            if node is not None:
                return node
            node = Node(
                len(self._nodes),
                f"M{len(self._molecular) + 1}",
                case_frame.semantic,
                _NodeKind.MOLECULAR,
                case_frame=case_frame,
                wires=tuple(wires),
            )
            self._nodes.append(node)
            self._molecular.append(node)
            self._molecular_index[(case_frame, signature)] = node
        logger.debug("Built %s over %r with %d wire(s)", node.name, case_frame, len(wires))
        return node

    def _owns_node(self, node: Node) -> bool:
        return 0 <= node.id < len(self._nodes) and self._nodes[node.id] is node

    # ── Topology views ───────────────────────────────────────────────────────

    def wire_matrix(self) -> sparse.csr_matrix:
        """Sparse (n_molecular, n_nodes) matrix of wire counts.

        Row *i* is the *i*-th entry of :attr:`molecular_nodes`; column *j* is
        the node with ``id == j``.
        """
        rows: List[int] = []
        cols: List[int] = []
        vals: List[float] = []
        for row, node in enumerate(self._molecular):
            for wire in node.wires:
                rows.append(row)
                cols.append(wire.node.id)
                vals.append(1.0)
        return sparse.csr_matrix(
            (
                np.asarray(vals, dtype=np.float64),
                (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64)),
            ),
            shape=(len(self._molecular), len(self._nodes)),
            dtype=np.float64,
        )

    def dominating_nodes(self, node: Node) -> List[Node]:
        """Molecular nodes from which *node* is reachable by following wires."""
        if not self._owns_node(node):
            raise ValueError(f"Node '{node.name}' does not belong to this network.")
        W = self.wire_matrix().tocsc()
        seen: set[int] = set()
        queue: deque[int] = deque([node.id])
        while queue:
            col = queue.popleft()
            start, end = W.indptr[col], W.indptr[col + 1]
            for row in W.indices[start:end]:
                parent = self._molecular[int(row)]
                if parent.id not in seen:
                    seen.add(parent.id)
                    queue.append(parent.id)
        return [m for m in self._molecular if m.id in seen]

    # ── Accessors ────────────────────────────────────────────────────────────

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes)

    @property
    def molecular_nodes(self) -> List[Node]:
        return list(self._molecular)

    @property
    def base_nodes(self) -> List[Node]:
        return [n for n in self._nodes if n.is_base]

    @property
    def case_frames(self) -> List[CaseFrame]:
        return list(self._case_frames)

    @property
    def relation_names(self) -> List[str]:
        return list(self._relations)

    def summary(self) -> str:
        """Human-readable summary of the network."""
        lines = [
            f"Network  relations={len(self._relations)}  "
            f"frames={len(self._case_frames)}  nodes={len(self._nodes)}  "
            f"molecular={len(self._molecular)}",
        ]
        if self._molecular:
            lines.append("")
            lines.append("Molecular nodes:")
            for node in self._molecular:
                wires = " ".join(repr(w) for w in node.wires)
                lines.append(f"  {node.name:6s} {node.case_frame!r}  {wires}")
        return "\n".join(lines)
