"""rdflib Bridge — reads rdflib data into the model and writes it back out.

The forward direction (model → rdflib) lives on the view types themselves as
``to_rdflib()``; see ``rdfmodel.interchange``. This module adds:

  1. rdflib node → model conversions, checked by position:
       subject / graph name  URIRef, BNode
       predicate             URIRef
       object                URIRef, BNode, Literal
  2. Collections:
       triples → rdflib.Graph       and   rdflib.Graph   → triples
       quads   → rdflib.Dataset     and   rdflib.Dataset → quads

Anything rdflib can hold that has no counterpart here (variables, quoted
graphs, literals in subject position, ...) raises ``TypeError``.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from rdflib import BNode, Dataset, Graph, URIRef
from rdflib import Literal as RdflibLiteral
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID
from rdflib.term import Node

from .graph_name import DEFAULT_GRAPH, GraphName
from .statements import Quad, Triple
from .terms import NamedOrBlankNode, Term
from .types import XSD_STRING, BlankNode, Literal, NamedNode


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

def _describe(node: object) -> str:
    return f"{type(node).__name__} {node!r}"


def named_node_from_rdflib(node: Node) -> NamedNode:
    if not isinstance(node, URIRef):
        raise TypeError(f"Expected an IRI, got {_describe(node)}")
    return NamedNode(str(node))


def literal_from_rdflib(node: Node) -> Literal:
    """Convert an rdflib literal, keeping its lexical form.

    rdflib leaves the datatype unset on simple and language-tagged literals;
    those become ``xsd:string`` and ``rdf:langString`` literals.
    """
    if not isinstance(node, RdflibLiteral):
        raise TypeError(f"Expected a literal, got {_describe(node)}")
    if node.language is not None:
        return Literal.language_tagged(str(node), node.language)
    if node.datatype is None:
        return Literal(str(node), XSD_STRING)
    return Literal.typed(str(node), NamedNode(str(node.datatype)))


def node_from_rdflib(node: Node) -> NamedOrBlankNode:
    """Convert an rdflib subject or graph name."""
    if isinstance(node, URIRef):
        return NamedOrBlankNode.from_value(NamedNode(str(node)))
    if isinstance(node, BNode):
        return NamedOrBlankNode.from_value(BlankNode(str(node)))
    raise TypeError(f"Expected an IRI or blank node, got {_describe(node)}")


def term_from_rdflib(node: Node) -> Term:
    """Convert an rdflib object."""
    if isinstance(node, RdflibLiteral):
        return Term.from_value(literal_from_rdflib(node))
    return Term.from_value(node_from_rdflib(node))


def graph_name_from_rdflib(node: Node | None) -> GraphName:
    """Convert an rdflib graph identifier; None and rdflib's own default
    graph identifier both mean the default graph."""
    if node is None or node == DATASET_DEFAULT_GRAPH_ID:
        return DEFAULT_GRAPH
    return GraphName.from_option(node_from_rdflib(node))


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

def triple_from_rdflib(triple: tuple[Node, Node, Node]) -> Triple:
    subject, predicate, obj = triple
    return Triple(
        node_from_rdflib(subject),
        named_node_from_rdflib(predicate),
        term_from_rdflib(obj),
    )


def quad_from_rdflib(quad: tuple[Node, Node, Node, Node | None]) -> Quad:
    subject, predicate, obj, graph_name = quad
    return Quad(
        node_from_rdflib(subject),
        named_node_from_rdflib(predicate),
        term_from_rdflib(obj),
        graph_name_from_rdflib(graph_name),
    )


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

def triples_to_graph(triples: Iterable[Triple], graph: Graph | None = None) -> Graph:
    """Add ``triples`` to ``graph`` (a new one when omitted) and return it."""
    g = Graph() if graph is None else graph
    count = 0
    for triple in triples:
        g.add(triple.to_rdflib())
        count += 1
    logger.debug("Added %d triples to rdflib graph %s", count, g.identifier)
    return g


def graph_to_triples(graph: Graph) -> Iterator[Triple]:
    for triple in graph:
        yield triple_from_rdflib(triple)


def quads_to_dataset(quads: Iterable[Quad], dataset: Dataset | None = None) -> Dataset:
    """Add ``quads`` to ``dataset`` (a new one when omitted) and return it.

    Quads in the default graph go to the dataset's default graph.
    """
    ds = Dataset() if dataset is None else dataset
    count = 0
    for quad in quads:
        subject, predicate, obj, graph_name = quad.to_rdflib()
        if graph_name is None:
            ds.add((subject, predicate, obj))
        else:
            ds.add((subject, predicate, obj, graph_name))
        count += 1
    logger.debug("Added %d quads to rdflib dataset", count)
    return ds


def dataset_to_quads(dataset: Dataset) -> Iterator[Quad]:
    for quad in dataset.quads((None, None, None, None)):
        yield quad_from_rdflib(quad)
