# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Test Network Structure
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Unit tests for the in-memory Network.

Uses a small isa network:

    M1 = isa(Fido, Dog)      {member: Fido, class: Dog}
    M2 = isa(Dog, Animal)    {member: Dog, class: Animal}
    M3 = not(M1)             {arg: M1}

Node ids follow build order: Fido=0, Dog=1, Animal=2, M1=3, M2=4, M3=5.
"""

from __future__ import annotations

import numpy as np
import pytest

from snepslog.network.structure import (
    ENTITY,
    INFIMUM,
    PROPOSITION,
    CaseFrame,
    CaseFrameMismatchError,
    Network,
    Relation,
    RelationNotFoundError,
    Wire,
)


# ── Fixtures ─────────────────────────────────────────────────────────────────


def _build_isa_network():
    net = Network()
    member = net.define_relation("member", ENTITY)
    cls = net.define_relation("class", ENTITY)
    arg = net.define_relation("arg", PROPOSITION)
    isa = net.define_case_frame(PROPOSITION, [member, cls], label="isa")
    neg = net.define_case_frame(PROPOSITION, [arg], label="not")

    fido = net.build_base_node("Fido")
    dog = net.build_base_node("Dog")
    animal = net.build_base_node("Animal")

    m1 = net.build_molecular_node(isa, [Wire(member, fido), Wire(cls, dog)])
    m2 = net.build_molecular_node(isa, [Wire(member, dog), Wire(cls, animal)])
    m3 = net.build_molecular_node(neg, [Wire(arg, m1)])
    return net, {
        "member": member,
        "class": cls,
        "arg": arg,
        "isa": isa,
        "not": neg,
        "Fido": fido,
        "Dog": dog,
        "Animal": animal,
        "M1": m1,
        "M2": m2,
        "M3": m3,
    }


@pytest.fixture
def isa_net():
    return _build_isa_network()


# ── Relations ────────────────────────────────────────────────────────────────


class TestRelations:
    def test_define_relation_is_idempotent(self):
        net = Network()
        first = net.define_relation("member", ENTITY)
        second = net.define_relation("member", PROPOSITION)
        assert first is second
        assert first.semantic == ENTITY

    def test_get_relation(self):
        net = Network()
        rel = net.define_relation("class", ENTITY)
        assert net.get_relation("class") is rel
        assert net.has_relation("class")

    def test_unknown_relation_raises_lookup_error(self):
        net = Network()
        with pytest.raises(RelationNotFoundError, match="member"):
            net.get_relation("member")
        with pytest.raises(LookupError):
            net.get_relation("member")

    def test_empty_relation_name_rejected(self):
        with pytest.raises(ValueError):
            Network().define_relation("")


# ── Case frames ──────────────────────────────────────────────────────────────


class TestCaseFrames:
    def test_structural_deduplication_ignores_order(self):
        net = Network()
        a = net.define_relation("a", ENTITY)
        b = net.define_relation("b", ENTITY)
        f1 = net.define_case_frame(PROPOSITION, [a, b], label="ab")
        f2 = net.define_case_frame(PROPOSITION, [b, a], label="ba")
        assert f1 is f2
        assert f2.label == "ab"
        assert len(net.case_frames) == 1

    def test_semantic_is_part_of_the_key(self):
        net = Network()
        a = net.define_relation("a", ENTITY)
        f1 = net.define_case_frame(PROPOSITION, [a])
        f2 = net.define_case_frame(ENTITY, [a])
        assert f1 is not f2

    def test_duplicate_relation_names_rejected(self):
        rel = Relation("a")
        with pytest.raises(ValueError, match="Duplicate"):
            CaseFrame(PROPOSITION, (rel, rel))

    def test_undefined_relation_rejected(self):
        net = Network()
        with pytest.raises(RelationNotFoundError):
            net.define_case_frame(PROPOSITION, [Relation("ghost")])

    def test_empty_frame_rejected(self):
        with pytest.raises(ValueError):
            Network().define_case_frame(PROPOSITION, [])

    def test_repr_shows_label_and_relations(self, isa_net):
        _, n = isa_net
        assert repr(n["isa"]) == "isa(Proposition: member class)"


# ── Nodes ────────────────────────────────────────────────────────────────────


class TestNodes:
    def test_base_nodes_interned_per_semantic(self):
        net = Network()
        assert net.build_base_node("2") is net.build_base_node(" 2 ")
        assert net.build_base_node("2", INFIMUM) is not net.build_base_node("2")

    def test_empty_literal_rejected(self):
        with pytest.raises(ValueError):
            Network().build_base_node("  ")

    def test_molecular_names_and_semantics(self, isa_net):
        _, n = isa_net
        assert [n["M1"].name, n["M2"].name, n["M3"].name] == ["M1", "M2", "M3"]
        assert n["M1"].is_molecular and not n["M1"].is_base
        assert n["M1"].semantic == PROPOSITION
        assert n["M1"].case_frame is n["isa"]

    def test_molecular_interning_ignores_wire_order(self, isa_net):
        net, n = isa_net
        again = net.build_molecular_node(
            n["isa"], [Wire(n["class"], n["Dog"]), Wire(n["member"], n["Fido"])]
        )
        assert again is n["M1"]
        assert len(net.molecular_nodes) == 3

    def test_nodes_at(self, isa_net):
        _, n = isa_net
        assert n["M1"].nodes_at("member") == [n["Fido"]]
        assert n["M1"].nodes_at("arg") == []

    def test_relation_outside_frame_rejected(self, isa_net):
        net, n = isa_net
        with pytest.raises(CaseFrameMismatchError, match="arg"):
            net.build_molecular_node(n["isa"], [Wire(n["arg"], n["Fido"])])

    def test_empty_wire_set_rejected(self, isa_net):
        net, n = isa_net
        with pytest.raises(CaseFrameMismatchError):
            net.build_molecular_node(n["isa"], [])

    def test_foreign_node_rejected(self, isa_net):
        net, n = isa_net
        other = Network()
        stranger = other.build_base_node("Fido")
        with pytest.raises(CaseFrameMismatchError, match="does not belong"):
            net.build_molecular_node(n["not"], [Wire(n["arg"], stranger)])

    def test_foreign_frame_rejected(self, isa_net):
        _, n = isa_net
        other = Network()
        other.define_relation("member", ENTITY)
        other.define_relation("class", ENTITY)
        with pytest.raises(CaseFrameMismatchError, match="not defined"):
            other.build_molecular_node(n["isa"], [])

    def test_failed_build_leaves_network_unchanged(self, isa_net):
        net, n = isa_net
        before = len(net.nodes)
        with pytest.raises(CaseFrameMismatchError):
            net.build_molecular_node(n["isa"], [Wire(n["arg"], n["Dog"])])
        assert len(net.nodes) == before


# ── Topology ─────────────────────────────────────────────────────────────────


class TestTopology:
    def test_wire_matrix_shape(self, isa_net):
        net, _ = isa_net
        W = net.wire_matrix()
        assert W.shape == (3, 6)
        assert W.nnz == 5

    def test_wire_matrix_rows(self, isa_net):
        net, _ = isa_net
        dense = net.wire_matrix().toarray()
        np.testing.assert_array_equal(dense[0], [1, 1, 0, 0, 0, 0])
        np.testing.assert_array_equal(dense[1], [0, 1, 1, 0, 0, 0])
        np.testing.assert_array_equal(dense[2], [0, 0, 0, 1, 0, 0])

    def test_dominating_nodes(self, isa_net):
        net, n = isa_net
        assert net.dominating_nodes(n["Fido"]) == [n["M1"], n["M3"]]
        assert net.dominating_nodes(n["Dog"]) == [n["M1"], n["M2"], n["M3"]]
        assert net.dominating_nodes(n["Animal"]) == [n["M2"]]
        assert net.dominating_nodes(n["M3"]) == []

    def test_dominating_nodes_rejects_foreign_node(self, isa_net):
        net, _ = isa_net
        with pytest.raises(ValueError):
            net.dominating_nodes(Network().build_base_node("x"))

    def test_accessors_and_summary(self, isa_net):
        net, n = isa_net
        assert net.base_nodes == [n["Fido"], n["Dog"], n["Animal"]]
        assert net.relation_names == ["member", "class", "arg"]
        text = net.summary()
        assert "molecular=3" in text
        assert "M1" in text and "member:Fido" in text
