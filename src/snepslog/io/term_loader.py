# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Term Descriptor Loader
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Load parsed term descriptors from JSON.

Each descriptor is an object with a ``category`` tag::

    {"category": "set", "kind": "xor", "args": ["p", "q", "r"]}
    {"category": "entailment", "kind": "NumericalEntailment",
     "antecedents": ["p", "q"], "consequents": ["r"], "i": "1"}
    {"category": "act", "action": "believe",
     "objects": [["p"], [{"category": "negated", "arg": "q"}]]}
    {"category": "define-relation", "name": "member", "semantic": "Entity"}
    {"category": "define-frame", "semantic": "Proposition",
     "name": "Isa", "relations": "(nil member class)"}

Plain strings are base-node literals; nested objects are nested terms.
Anything else raises ``TermSyntaxError``.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from snepslog.compiler.terms import (
    ActTerm,
    AndOrTerm,
    AtomicTerm,
    Connective,
    Entailment,
    EntailmentKind,
    FrameDefinition,
    InfixedTerm,
    NegatedTerm,
    Operand,
    RelationDefinition,
    SetTerm,
    SnereTag,
    SnereTerm,
    Term,
    TermSyntaxError,
    ThreshTerm,
)

Descriptor = Union[Term, FrameDefinition, RelationDefinition]
E = TypeVar("E", bound=Enum)


# ── Field helpers ────────────────────────────────────────────────────────────


def _require(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise TermSyntaxError(
            f"'{data.get('category', '?')}' descriptor is missing field '{key}'"
        )
    return data[key]


def _enum(enum_cls: Type[E], value: Any) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise TermSyntaxError(
            f"Unknown {enum_cls.__name__} {value!r}; expected one of: {allowed}"
        ) from None


def _bound(value: Any, name: str) -> int:
    """Numeric-literal bound: an int or a decimal integer string."""
    if isinstance(value, bool):
        raise TermSyntaxError(f"{name} must be an integer literal, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("+-").isdigit():
        return int(value.strip())
    raise TermSyntaxError(f"{name} must be an integer literal, got {value!r}")


def _optional_bound(value: Any, name: str) -> Optional[int]:
    return None if value is None else _bound(value, name)


def _operand(value: Any) -> Operand:
    if isinstance(value, str):
        if not value.strip():
            raise TermSyntaxError("Empty node literal")
        return value
    if isinstance(value, Mapping):
        item = descriptor_from_dict(value)
        if isinstance(item, (FrameDefinition, RelationDefinition)):
            raise TermSyntaxError(f"'{value.get('category')}' cannot be used as an operand")
        return item
    raise TermSyntaxError(f"Operands must be strings or term objects, got {value!r}")


def _operands(value: Any, field: str) -> Tuple[Operand, ...]:
    if not isinstance(value, list):
        raise TermSyntaxError(f"'{field}' must be a list, got {value!r}")
    return tuple(_operand(v) for v in value)


# ── Category parsers ─────────────────────────────────────────────────────────


def _infixed(data: Mapping[str, Any]) -> InfixedTerm:
    return InfixedTerm(
        _enum(Connective, _require(data, "kind")),
        _operand(_require(data, "left")),
        _operand(_require(data, "right")),
    )


def _entailment(data: Mapping[str, Any]) -> Entailment:
    return Entailment(
        _enum(EntailmentKind, _require(data, "kind")),
        _operands(_require(data, "antecedents"), "antecedents"),
        _operands(_require(data, "consequents"), "consequents"),
        _optional_bound(data.get("i"), "i"),
    )


def _negated(data: Mapping[str, Any]) -> NegatedTerm:
    return NegatedTerm(_operand(_require(data, "arg")))


def _andor(data: Mapping[str, Any]) -> AndOrTerm:
    return AndOrTerm(
        _bound(_require(data, "min"), "min"),
        _bound(_require(data, "max"), "max"),
        _operands(_require(data, "args"), "args"),
    )


def _set(data: Mapping[str, Any]) -> SetTerm:
    return SetTerm(
        _enum(Connective, _require(data, "kind")),
        _operands(_require(data, "args"), "args"),
    )


def _thresh(data: Mapping[str, Any]) -> ThreshTerm:
    return ThreshTerm(
        _bound(_require(data, "thresh"), "thresh"),
        _optional_bound(data.get("max"), "max"),
        _operands(_require(data, "args"), "args"),
    )


def _snere(data: Mapping[str, Any]) -> SnereTerm:
    return SnereTerm(
        _enum(SnereTag, _require(data, "tag")),
        _operand(_require(data, "first")),
        _operand(_require(data, "second")),
    )


def _act(data: Mapping[str, Any]) -> ActTerm:
    groups = _require(data, "objects")
    if not isinstance(groups, list):
        raise TermSyntaxError(f"'objects' must be a list of lists, got {groups!r}")
    return ActTerm(
        _operand(_require(data, "action")),
        tuple(_operands(g, "objects") for g in groups),
    )


def _atomic(data: Mapping[str, Any]) -> AtomicTerm:
    predicate = _require(data, "predicate")
    if not isinstance(predicate, str):
        raise TermSyntaxError(f"predicate must be a string, got {predicate!r}")
    return AtomicTerm(predicate, _operands(data.get("args", []), "args"))


def _define_frame(data: Mapping[str, Any]) -> FrameDefinition:
    relations = _require(data, "relations")
    if isinstance(relations, list):
        relations = tuple(str(r) for r in relations)
    elif not isinstance(relations, str):
        raise TermSyntaxError(f"relations must be a string or list, got {relations!r}")
    return FrameDefinition(
        str(_require(data, "semantic")),
        str(_require(data, "name")),
        relations,
    )


def _define_relation(data: Mapping[str, Any]) -> RelationDefinition:
    name = _require(data, "name")
    if not isinstance(name, str) or not name.strip():
        raise TermSyntaxError(f"relation name must be a non-empty string, got {name!r}")
    return RelationDefinition(name.strip(), str(data.get("semantic", "Proposition")))


_PARSERS: Dict[str, Callable[[Mapping[str, Any]], Descriptor]] = {
    "infixed": _infixed,
    "entailment": _entailment,
    "negated": _negated,
    "andor": _andor,
    "set": _set,
    "thresh": _thresh,
    "snere": _snere,
    "act": _act,
    "atomic": _atomic,
    "define-frame": _define_frame,
    "define-relation": _define_relation,
}


# ── Public API ───────────────────────────────────────────────────────────────


def descriptor_from_dict(data: Mapping[str, Any]) -> Descriptor:
    """Turn one JSON object into a term or a definition command."""
    if not isinstance(data, Mapping):
        raise TermSyntaxError(f"Descriptors must be JSON objects, got {data!r}")
    category = data.get("category")
    parser = _PARSERS.get(category)  # type: ignore[arg-type]
    if parser is None:
        raise TermSyntaxError(
            f"Unknown term category {category!r}; expected one of: "
            + ", ".join(sorted(_PARSERS))
        )
    return parser(data)


def load_descriptors(path: Union[str, Path]) -> List[Descriptor]:
    """Read a JSON file holding one descriptor or a list of descriptors."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TermSyntaxError(f"{path}: invalid JSON ({exc})") from exc
    if isinstance(payload, Mapping):
        payload = [payload]
    if not isinstance(payload, list):
        raise TermSyntaxError(f"{path}: expected a descriptor object or a list")
    return [descriptor_from_dict(item) for item in payload]
