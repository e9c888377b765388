# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Term Descriptors
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Typed term descriptors handed over by the parser.

Every term category is a frozen dataclass; ``Term`` is their closed union.
Operands are either network nodes, base-node literals (``str``) or nested
terms, which the compiler builds first.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from snepslog.network.structure import Node


class TermSyntaxError(ValueError):
    """Raised for malformed term descriptors or relation specifications."""


class Connective(str, Enum):
    AND = "and"
    OR = "or"
    NAND = "nand"
    NOR = "nor"
    XOR = "xor"
    IFF = "iff"
    EQUALITY = "equality"


INFIX_CONNECTIVES = frozenset({Connective.AND, Connective.OR, Connective.EQUALITY})
SET_CONNECTIVES = frozenset({
    Connective.AND,
    Connective.OR,
    Connective.NAND,
    Connective.NOR,
    Connective.XOR,
    Connective.IFF,
})


class EntailmentKind(str, Enum):
    AND = "AndEntailment"
    OR = "OrEntailment"
    NUMERICAL = "NumericalEntailment"
    IMPLICATION = "Implication"


class SnereTag(str, Enum):
    IFDO = "ifdo"
    WHENDO = "whendo"
    WHENEVERDO = "wheneverdo"
    ACT_PLAN = "ActPlan"
    EFFECT = "Effect"
    GOAL_PLAN = "GoalPlan"
    PRECONDITION = "Precondition"


Operand = Union[Node, str, "Term"]


def _check_bound(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TermSyntaxError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise TermSyntaxError(f"{name} must be >= 0, got {value}")


# ── Term categories ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class InfixedTerm:
    """``a and b``, ``a or b``, ``a <=> b``."""

    kind: Connective
    left: Operand
    right: Operand

    def __post_init__(self) -> None:
        if self.kind not in INFIX_CONNECTIVES:
            raise TermSyntaxError(f"'{self.kind.value}' is not an infix connective")


@dataclass(frozen=True)
class Entailment:
    """``{ants} &=> {cqs}``, ``v=>``, ``i=>`` and ``=>``."""

    kind: EntailmentKind
    antecedents: Tuple[Operand, ...]
    consequents: Tuple[Operand, ...]
    i: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.antecedents or not self.consequents:
            raise TermSyntaxError("Entailments need antecedents and consequents")
        if self.kind is EntailmentKind.NUMERICAL:
            if self.i is None:
                raise TermSyntaxError("NumericalEntailment requires i")
            _check_bound("i", self.i)
        elif self.i is not None:
            raise TermSyntaxError(f"{self.kind.value} does not take i")


@dataclass(frozen=True)
class NegatedTerm:
    arg: Operand


@dataclass(frozen=True)
class AndOrTerm:
    """``andor(i, j){args}`` with explicit bounds."""

    min: int
    max: int
    args: Tuple[Operand, ...]

    def __post_init__(self) -> None:
        _check_bound("andor min", self.min)
        _check_bound("andor max", self.max)
        if self.min > self.max:
            raise TermSyntaxError(
                f"andor min must not exceed max, got ({self.min}, {self.max})"
            )
        if not self.args:
            raise TermSyntaxError("andor needs at least one argument")


@dataclass(frozen=True)
class SetTerm:
    """``and{...}``, ``or{...}``, ``nand{...}``, ``nor{...}``, ``xor{...}``, ``iff{...}``."""

    kind: Connective
    args: Tuple[Operand, ...]

    def __post_init__(self) -> None:
        if self.kind not in SET_CONNECTIVES:
            raise TermSyntaxError(f"'{self.kind.value}' is not a set connective")


@dataclass(frozen=True)
class ThreshTerm:
    """``thresh(i){args}`` or ``thresh(i, j){args}``."""

    thresh: int
    max: Optional[int]
    args: Tuple[Operand, ...]

    def __post_init__(self) -> None:
        _check_bound("thresh", self.thresh)
        if self.max is not None:
            _check_bound("thresh max", self.max)
            if self.thresh > self.max:
                raise TermSyntaxError(
                    f"thresh must not exceed its max, got ({self.thresh}, {self.max})"
                )
        if not self.args:
            raise TermSyntaxError("thresh needs at least one argument")


@dataclass(frozen=True)
class SnereTerm:
    tag: SnereTag
    first: Operand
    second: Operand


@dataclass(frozen=True)
class ActTerm:
    """``action(obj, {obj, obj}, ...)``; object groups are flattened in order."""

    action: Operand
    objects: Tuple[Tuple[Operand, ...], ...]

    @property
    def flat_objects(self) -> Tuple[Operand, ...]:
        return tuple(obj for group in self.objects for obj in group)


@dataclass(frozen=True)
class AtomicTerm:
    """Predicate application ``P(x1, ..., xn)``."""

    predicate: str
    args: Tuple[Operand, ...]

    def __post_init__(self) -> None:
        if not self.predicate:
            raise TermSyntaxError("Atomic terms need a predicate name")


Term = Union[
    InfixedTerm,
    Entailment,
    NegatedTerm,
    AndOrTerm,
    SetTerm,
    ThreshTerm,
    SnereTerm,
    ActTerm,
    AtomicTerm,
]


@dataclass(frozen=True)
class FrameDefinition:
    """Mode-3 ``define-frame`` command: semantic type, name, relation spec."""

    semantic: str
    name: str
    relations: Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class RelationDefinition:
    """``define-relation`` command: a relation name and its semantic type."""

    name: str
    semantic: str = "Proposition"
