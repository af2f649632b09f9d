"""Interchange representation — rdflib nodes and statement tuples.

rdflib is the term representation this package hands data to and reads data
from. Every view type converts into it with ``to_rdflib()``:

  NamedNodeRef / BlankNodeRef / LiteralRef → URIRef / BNode / rdflib.Literal
  NamedOrBlankNodeRef                      → URIRef | BNode
  TermRef                                  → URIRef | BNode | rdflib.Literal
  GraphNameRef                             → URIRef | BNode | None
  TripleRef                                → (subject, predicate, object)
  QuadRef                                  → (subject, predicate, object, graph)

All textual rendering in the package goes through the formatters below, so
``str(value)`` and the rendering of ``value.to_rdflib()`` are identical
character for character. IRIs and blank nodes use rdflib's ``n3()``; literals
use the quoting of rdflib's N-Triples serializer, so every rendering stays on
one line.
"""

from __future__ import annotations

from rdflib import BNode, Literal, URIRef
from rdflib.plugins.serializers.nt import _quoteLiteral


RdflibSubject = URIRef | BNode
RdflibTerm = URIRef | BNode | Literal
RdflibGraphName = RdflibSubject | None
RdflibTriple = tuple[RdflibSubject, URIRef, RdflibTerm]
RdflibQuad = tuple[RdflibSubject, URIRef, RdflibTerm, RdflibGraphName]


def format_node(node: RdflibTerm) -> str:
    if isinstance(node, Literal):
        return _quoteLiteral(node)
    return node.n3()


def format_triple(triple: RdflibTriple) -> str:
    """Render ``(s, p, o)`` as ``s p o``."""
    return " ".join(format_node(node) for node in triple)


def format_quad(quad: RdflibQuad) -> str:
    """Render ``(s, p, o, g)`` as ``s p o g``.

    The graph name is left out when it is None (the default graph), matching
    N-Quads.
    """
    subject, predicate, obj, graph_name = quad
    nodes: list[RdflibTerm] = [subject, predicate, obj]
    if graph_name is not None:
        nodes.append(graph_name)
    return " ".join(format_node(node) for node in nodes)
