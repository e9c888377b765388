# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Term Compiler
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
TermCompiler: turns parsed SNePSLOG terms into molecular nodes.

Each term category has a fixed wiring contract:

    infixed      a1, a2 + connective bounds (k = 2) on infixAndOr/infixThresh
    entailment   andAnt*/ant* + cq* (+ i) on andRule/numericalRule/orRule
    negated      arg + max=0, min=0 on andOrRule
    andor        arg* + explicit max, min on andOrRule
    set          arg* + connective bounds (k = |args|)
    thresh       arg* + thresh (+ threshMax) on threshRule
    snere        two relations from SNERE_FRAME_TABLE
    act          action + obj / obj1..objN on the arity-selected frame
    atomic       mode-dependent frame from the CaseFrameRegistry

Nested operand terms are compiled first, depth-first and left to right.
Structural checks that need no nodes (act and set arity, mode-3 frame
lookup and arity) run over the whole term before anything is built.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Union, get_args

from snepslog.core.config_schema import SnepslogSettings
from snepslog.network.structure import (
    ENTITY,
    CaseFrame,
    CaseFrameMismatchError,
    Network,
    Node,
    Relation,
    Semantic,
    Wire,
)

from .arity import act_frame_spec
from .connectives import Cardinality, ConnectiveEncoder, FrameShape, encode_connective
from .frames import SNERE_FRAME_TABLE, DefaultFrames, install_default_frames
from .registry import (
    MODE_ONE,
    MODE_THREE,
    MODE_TWO,
    SUPPORTED_MODES,
    CaseFrameRegistry,
    NamedCaseFrame,
    RelationSpec,
)
from .terms import (
    ActTerm,
    AndOrTerm,
    AtomicTerm,
    Entailment,
    EntailmentKind,
    FrameDefinition,
    InfixedTerm,
    NegatedTerm,
    Operand,
    RelationDefinition,
    SetTerm,
    SnereTerm,
    Term,
    TermSyntaxError,
    ThreshTerm,
)

logger = logging.getLogger(__name__)


class TermCompiler:
    """Compiles terms against one network, registry and settings object.

    Parameters
    ----------
    network : target network; a fresh one is created when omitted.
    registry : mode-3 frame cache; must share *network*.
    settings : session settings (active mode, printing mode).
    """

    def __init__(
        self,
        network: Optional[Network] = None,
        registry: Optional[CaseFrameRegistry] = None,
        settings: Optional[SnepslogSettings] = None,
    ) -> None:
        self.network = network if network is not None else Network()
        if registry is None:
            registry = CaseFrameRegistry(self.network)
        elif registry.network is not self.network:
            raise ValueError("registry must be bound to the compiler's network")
        self.registry = registry
        self.settings = settings if settings is not None else SnepslogSettings()
        self.frames: DefaultFrames = install_default_frames(self.network)
        self.encoder = ConnectiveEncoder(self.network, self.frames)

        self._handlers: Dict[type, Callable[[Term], Node]] = {
            InfixedTerm: self._compile_infixed,
            Entailment: self._compile_entailment,
            NegatedTerm: self._compile_negated,
            AndOrTerm: self._compile_andor,
            SetTerm: self._compile_set,
            ThreshTerm: self._compile_thresh,
            SnereTerm: self._compile_snere,
            ActTerm: self._compile_act,
            AtomicTerm: self._compile_atomic,
        }
        missing = set(get_args(Term)) - set(self._handlers)
        if missing:
            names = sorted(t.__name__ for t in missing)
            raise RuntimeError(f"No wiring for term categories: {names}")

    # ── Public API ───────────────────────────────────────────────────────────

    def compile(self, term: Term) -> Node:
        """Compile *term* and return its molecular node."""
        try:
            self._preflight(term)
            return self._build(term)
        except (ValueError, LookupError) as exc:
            logger.warning(
                "Compilation of %s failed: %s",
                type(term).__name__,
                exc,
                extra={"term_context": {"category": type(term).__name__, "mode": self.settings.mode}},
            )
            raise

    def define_frame(
        self,
        semantic: Union[str, Semantic],
        name: str,
        relations: RelationSpec,
    ) -> CaseFrame:
        """Define (or fetch) the mode-3 frame *name*."""
        return self.registry.mode_three_frame(semantic, name, relations)

    def execute(
        self, item: Union[Term, FrameDefinition, RelationDefinition]
    ) -> Union[Node, NamedCaseFrame, Relation]:
        """Run one loaded descriptor: relation or frame definitions, or terms."""
        if isinstance(item, RelationDefinition):
            return self.network.define_relation(item.name, Semantic(item.semantic))
        if isinstance(item, FrameDefinition):
            return self.registry.define_named(item.semantic, item.name, item.relations)
        return self.compile(item)

    # ── Dispatch ─────────────────────────────────────────────────────────────

    def _build(self, term: Term) -> Node:
        handler = self._handlers.get(type(term))
        if handler is None:
            raise TypeError(f"Cannot compile {type(term).__name__!r}")
        node = handler(term)
        logger.debug("Compiled %s -> %s", type(term).__name__, node.name)
        return node

    def _operand(self, operand: Operand) -> Node:
        if isinstance(operand, Node):
            return operand
        if isinstance(operand, str):
            return self.network.build_base_node(operand, ENTITY)
        return self._build(operand)

    def _operands(self, operands: Sequence[Operand]) -> List[Node]:
        return [self._operand(o) for o in operands]

    def _molecular(self, frame: CaseFrame, wires: List[Wire]) -> Node:
        return self.network.build_molecular_node(frame, wires)

    def _preflight(self, term: object) -> None:
        """Reject structurally invalid terms before any node is built."""
        if isinstance(term, Node):
            return
        if isinstance(term, str):
            if not term.strip():
                raise TermSyntaxError("Empty node literal")
            return
        if type(term) not in self._handlers:
            raise TypeError(f"Cannot compile {type(term).__name__!r}")
        if isinstance(term, ActTerm):
            act_frame_spec(len(term.flat_objects))
            children: Sequence[object] = (term.action,) + term.flat_objects
        elif isinstance(term, AtomicTerm):
            self._atomic_frame(term)
            children = term.args
        elif isinstance(term, InfixedTerm):
            children = (term.left, term.right)
        elif isinstance(term, Entailment):
            children = term.antecedents + term.consequents
        elif isinstance(term, NegatedTerm):
            children = (term.arg,)
        elif isinstance(term, SetTerm):
            encode_connective(term.kind, len(term.args))
            children = term.args
        elif isinstance(term, SnereTerm):
            children = (term.first, term.second)
        else:
            children = term.args  # AndOrTerm, ThreshTerm
        for child in children:
            self._preflight(child)

    # ── Connectives ──────────────────────────────────────────────────────────

    def _compile_infixed(self, term: InfixedTerm) -> Node:
        cardinality = encode_connective(term.kind, 2)
        left = self._operand(term.left)
        right = self._operand(term.right)
        wires = [
            Wire(self.frames.relation("a1"), left),
            Wire(self.frames.relation("a2"), right),
        ] + self.encoder.bound_wires(cardinality)
        return self._molecular(self.encoder.infix_frame_for(cardinality.shape), wires)

    def _compile_negated(self, term: NegatedTerm) -> Node:
        node = self._operand(term.arg)
        frame, wires = self.encoder.bounded(
            Cardinality(FrameShape.AND_OR, 0, 0), [node]
        )
        return self._molecular(frame, wires)

    def _compile_andor(self, term: AndOrTerm) -> Node:
        args = self._operands(term.args)
        frame, wires = self.encoder.bounded(
            Cardinality(FrameShape.AND_OR, term.min, term.max), args
        )
        return self._molecular(frame, wires)

    def _compile_set(self, term: SetTerm) -> Node:
        args = self._operands(term.args)
        frame, wires = self.encoder.encode(term.kind, args)
        return self._molecular(frame, wires)

    def _compile_thresh(self, term: ThreshTerm) -> Node:
        args = self._operands(term.args)
        frame, wires = self.encoder.bounded(
            Cardinality(FrameShape.THRESH, term.thresh, term.max), args
        )
        return self._molecular(frame, wires)

    # ── Entailments ──────────────────────────────────────────────────────────

    def _compile_entailment(self, term: Entailment) -> Node:
        if term.kind is EntailmentKind.AND:
            frame, ant = self.frames.and_rule, "andAnt"
        elif term.kind is EntailmentKind.NUMERICAL:
            frame, ant = self.frames.numerical_rule, "andAnt"
        else:
            # OrEntailment and Implication share orRule.
            frame, ant = self.frames.or_rule, "ant"

        ant_rel = self.frames.relation(ant)
        cq_rel = self.frames.relation("cq")
        wires = [Wire(ant_rel, n) for n in self._operands(term.antecedents)]
        wires += [Wire(cq_rel, n) for n in self._operands(term.consequents)]
        if term.i is not None:
            wires.append(Wire(self.frames.relation("i"), self.encoder.bound_node(term.i)))
        return self._molecular(frame, wires)

    # ── SNeRE ────────────────────────────────────────────────────────────────

    def _compile_snere(self, term: SnereTerm) -> Node:
        spec = SNERE_FRAME_TABLE[term.tag]
        first = self._operand(term.first)
        second = self._operand(term.second)
        wires = [
            Wire(self.frames.relation(spec.first), first),
            Wire(self.frames.relation(spec.second), second),
        ]
        return self._molecular(self.frames.snere[term.tag], wires)

    # ── Acts ─────────────────────────────────────────────────────────────────

    def _compile_act(self, term: ActTerm) -> Node:
        objects = term.flat_objects
        spec = act_frame_spec(len(objects))
        action = self._operand(term.action)
        wires = [Wire(self.frames.relation("action"), action)]
        for rel_name, obj in zip(spec.object_relations, self._operands(objects)):
            wires.append(Wire(self.frames.relation(rel_name), obj))
        return self._molecular(self.frames.act[len(objects)], wires)

    # ── Atomic terms ─────────────────────────────────────────────────────────

    def _atomic_frame(self, term: AtomicTerm) -> CaseFrame:
        mode = self.settings.mode
        arity = len(term.args)
        if mode == MODE_ONE:
            return self.registry.mode_one_frame(arity)
        if mode == MODE_TWO:
            return self.registry.mode_two_frame(term.predicate, arity)
        if mode == MODE_THREE:
            named = self.registry.named(term.predicate)
            expected = len(named.argument_relations)
            if expected != arity:
                raise CaseFrameMismatchError(
                    f"'{term.predicate}' takes {expected} argument(s), got {arity}"
                )
            return named.case_frame
        raise ValueError(
            f"Unsupported SNePSLOG mode {mode!r}; expected one of {SUPPORTED_MODES}"
        )

    def _compile_atomic(self, term: AtomicTerm) -> Node:
        frame = self._atomic_frame(term)
        args = self._operands(term.args)
        # Wire by the requested relations; a shared frame may list them in
        # another order.
        mode = self.settings.mode
        leading: Optional[Relation]
        if mode == MODE_THREE:
            named = self.registry.named(term.predicate)
            leading = named.leading_relation
            arg_relations: Sequence[Relation] = named.argument_relations
        else:
            if mode == MODE_ONE:
                rels = self.registry.mode_one_relations(len(args))
            else:
                rels = self.registry.mode_two_relations(term.predicate, len(args))
            leading, arg_relations = rels[0], rels[1:]

        wires: List[Wire] = []
        if leading is not None:
            wires.append(
                Wire(leading, self.network.build_base_node(term.predicate, ENTITY))
            )
        wires += [Wire(rel, node) for rel, node in zip(arg_relations, args)]
        return self._molecular(frame, wires)
