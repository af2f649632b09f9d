"""Tests for the NamedOrBlankNode and Term unions and their views."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import rdflib

from rdfmodel.interchange import format_node
from rdfmodel.terms import NamedOrBlankNode, NamedOrBlankNodeRef, Term, TermRef
from rdfmodel.types import XSD_INTEGER, BlankNode, Kind, Literal, NamedNode


IRI = NamedNode("http://ex/s")
BNODE = BlankNode("b1")
LITERAL = Literal.simple("v")


# ---------------------------------------------------------------------------
# NamedOrBlankNode
# ---------------------------------------------------------------------------

class TestNamedOrBlankNode:
    def test_from_named_node(self):
        node = NamedOrBlankNode.from_value(IRI)
        assert node.kind is Kind.NAMED_NODE
        assert node.value == IRI
        assert node.is_named_node()
        assert not node.is_blank_node()

    def test_from_blank_node(self):
        node = NamedOrBlankNode.from_value(BNODE)
        assert node.is_blank_node()
        assert not node.is_named_node()

    def test_from_views(self):
        assert NamedOrBlankNode.from_value(IRI.as_ref()) == NamedOrBlankNode.from_value(IRI)
        node = NamedOrBlankNode.from_value(BNODE)
        assert NamedOrBlankNode.from_value(node.as_ref()) == node

    def test_literal_is_rejected(self):
        with pytest.raises(TypeError):
            NamedOrBlankNode.from_value(LITERAL)
        with pytest.raises(TypeError):
            NamedOrBlankNodeRef.from_value(LITERAL.as_ref())

    def test_term_does_not_narrow(self):
        with pytest.raises(TypeError):
            NamedOrBlankNode.from_value(Term.from_value(IRI))

    def test_mismatched_tag_is_rejected(self):
        with pytest.raises(TypeError):
            NamedOrBlankNode(Kind.NAMED_NODE, BNODE)
        with pytest.raises(TypeError):
            NamedOrBlankNode(Kind.LITERAL, LITERAL)
        with pytest.raises(TypeError):
            NamedOrBlankNodeRef(Kind.BLANK_NODE, IRI.as_ref())

    def test_view_must_hold_views(self):
        with pytest.raises(TypeError):
            NamedOrBlankNodeRef(Kind.NAMED_NODE, IRI)

    def test_round_trip(self):
        for primitive in [IRI, BNODE]:
            node = NamedOrBlankNode.from_value(primitive)
            view = node.as_ref()
            assert view.kind is node.kind
            assert view.into_owned() == node
            assert str(view) == str(node)

    def test_renders_as_primitive(self):
        assert str(NamedOrBlankNode.from_value(IRI)) == str(IRI)
        assert str(NamedOrBlankNode.from_value(BNODE)) == "_:b1"

    def test_equality_is_variant_aware(self):
        named = NamedOrBlankNode.from_value(NamedNode("x"))
        blank = NamedOrBlankNode.from_value(BlankNode("x"))
        assert named != blank

    def test_hash_consistent_across_flavors(self):
        node = NamedOrBlankNode.from_value(BNODE)
        assert node == node.as_ref()
        assert hash(node) == hash(node.as_ref())
        assert len({node, node.as_ref(), NamedOrBlankNode.from_value(BlankNode("b1"))}) == 1

    def test_to_rdflib(self):
        assert NamedOrBlankNode.from_value(IRI).as_ref().to_rdflib() == rdflib.URIRef(IRI.iri)
        assert NamedOrBlankNode.from_value(BNODE).as_ref().to_rdflib() == rdflib.BNode("b1")

    def test_pattern_matching(self):
        match NamedOrBlankNode.from_value(BNODE):
            case NamedOrBlankNode(Kind.BLANK_NODE, BlankNode(id)):
                assert id == "b1"
            case _:
                pytest.fail("blank node variant not matched")


# ---------------------------------------------------------------------------
# Term
# ---------------------------------------------------------------------------

class TestTerm:
    def test_variants(self):
        assert Term.from_value(IRI).is_named_node()
        assert Term.from_value(BNODE).is_blank_node()
        assert Term.from_value(LITERAL).is_literal()

    def test_from_views(self):
        assert Term.from_value(LITERAL.as_ref()) == Term.from_value(LITERAL)
        term = Term.from_value(IRI)
        assert Term.from_value(term.as_ref()) == term
        assert TermRef.from_value(term) == term

    def test_widening_keeps_variant_and_payload(self):
        node = NamedOrBlankNode.from_value(BNODE)
        term = Term.from_value(node)
        assert term.kind is Kind.BLANK_NODE
        assert term.value == BNODE
        assert not term.is_literal()

    def test_widening_from_view(self):
        node = NamedOrBlankNode.from_value(IRI)
        term = TermRef.from_value(node.as_ref())
        assert term.is_named_node()
        assert term.into_owned() == Term.from_value(IRI)

    def test_term_and_node_are_distinct_families(self):
        assert Term.from_value(IRI) != NamedOrBlankNode.from_value(IRI)

    def test_unknown_input_is_rejected(self):
        with pytest.raises(TypeError):
            Term.from_value("http://ex/s")
        with pytest.raises(TypeError):
            TermRef.from_value(rdflib.URIRef("http://ex/s"))

    def test_round_trip(self):
        for primitive in [IRI, BNODE, LITERAL, Literal.typed("7", XSD_INTEGER)]:
            term = Term.from_value(primitive)
            view = term.as_ref()
            assert view.into_owned() == term
            assert str(view) == str(term)
            assert hash(view) == hash(term)

    def test_renders_as_primitive(self):
        assert str(Term.from_value(LITERAL)) == '"v"'
        assert str(Term.from_value(Literal.language_tagged("v", "en"))) == '"v"@en'

    def test_to_rdflib_preserves_payload(self):
        lit = Term.from_value(Literal.typed("7", XSD_INTEGER)).as_ref().to_rdflib()
        assert isinstance(lit, rdflib.Literal)
        assert str(lit) == "7"
        assert str(lit.datatype) == XSD_INTEGER.iri

    def test_rendering_matches_rdflib(self):
        for primitive in [IRI, BNODE, LITERAL]:
            term = Term.from_value(primitive)
            assert str(term) == format_node(term.to_rdflib())
