"""Tests for graph names and their Option-like isomorphism."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import rdflib

from rdfmodel.graph_name import DEFAULT_GRAPH, GraphName, GraphNameRef
from rdfmodel.terms import NamedOrBlankNode
from rdfmodel.types import BlankNode, Kind, Literal, NamedNode


G = NamedNode("http://ex/g")
B = BlankNode("g1")


@pytest.fixture(params=["named", "blank", "default"])
def graph_name(request) -> GraphName:
    return {
        "named": GraphName.from_value(G),
        "blank": GraphName.from_value(B),
        "default": DEFAULT_GRAPH,
    }[request.param]


class TestConstruction:
    def test_default(self):
        assert GraphName() == DEFAULT_GRAPH
        assert GraphName.default() is DEFAULT_GRAPH
        assert DEFAULT_GRAPH.is_default_graph()
        assert DEFAULT_GRAPH.value is None
        assert not DEFAULT_GRAPH.is_named_node()
        assert not DEFAULT_GRAPH.is_blank_node()

    def test_named(self):
        name = GraphName.from_value(G)
        assert name.kind is Kind.NAMED_NODE
        assert name.is_named_node()
        assert name.value == G

    def test_blank(self):
        assert GraphName.from_value(B.as_ref()).is_blank_node()

    def test_from_none(self):
        assert GraphName.from_value(None) == DEFAULT_GRAPH
        assert GraphNameRef.from_value(None).is_default_graph()

    def test_literal_is_rejected(self):
        with pytest.raises(TypeError):
            GraphName.from_value(Literal.simple("g"))
        with pytest.raises(TypeError):
            GraphName(Kind.LITERAL, Literal.simple("g"))

    def test_default_graph_carries_no_payload(self):
        with pytest.raises(TypeError):
            GraphName(Kind.DEFAULT_GRAPH, G)
        with pytest.raises(TypeError):
            GraphName(Kind.NAMED_NODE, None)


class TestOptionIsomorphism:
    @pytest.mark.parametrize("option", [
        None,
        NamedOrBlankNode.from_value(G),
        NamedOrBlankNode.from_value(B),
    ])
    def test_option_round_trip(self, option):
        assert GraphName.from_option(option).to_option() == option

    def test_graph_name_round_trip(self, graph_name):
        assert GraphName.from_option(graph_name.to_option()) == graph_name

    def test_default_maps_to_none(self):
        assert DEFAULT_GRAPH.to_option() is None
        assert GraphName.from_option(None) is DEFAULT_GRAPH

    def test_view_round_trip(self, graph_name):
        view = graph_name.as_ref()
        assert GraphNameRef.from_option(view.to_option()) == view
        option = graph_name.to_option()
        view_option = view.to_option()
        if option is None:
            assert view_option is None
        else:
            assert view_option.into_owned() == option


class TestFlavors:
    def test_round_trip(self, graph_name):
        view = graph_name.as_ref()
        assert view.kind is graph_name.kind
        assert view.into_owned() == graph_name
        assert str(view) == str(graph_name)

    def test_hash_consistent(self, graph_name):
        assert graph_name == graph_name.as_ref()
        assert hash(graph_name) == hash(graph_name.as_ref())

    def test_default_differs_from_named(self):
        assert DEFAULT_GRAPH != GraphName.from_value(G)


class TestRendering:
    def test_default_token(self):
        assert str(DEFAULT_GRAPH) == "DEFAULT"
        assert str(GraphNameRef()) == "DEFAULT"

    def test_named_renders_as_node(self):
        assert str(GraphName.from_value(G)) == "<http://ex/g>"
        assert str(GraphName.from_value(B)) == "_:g1"

    def test_repr(self):
        assert repr(DEFAULT_GRAPH) == "GraphName(DEFAULT)"


class TestRdflibConversion:
    def test_default_is_none(self):
        assert DEFAULT_GRAPH.as_ref().to_rdflib() is None

    def test_named(self):
        assert GraphName.from_value(G).as_ref().to_rdflib() == rdflib.URIRef(G.iri)

    def test_blank(self):
        assert GraphName.from_value(B).as_ref().to_rdflib() == rdflib.BNode("g1")
