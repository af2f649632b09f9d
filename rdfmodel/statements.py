"""Statements — triples and quads.

  Triple = (subject: NamedOrBlankNode, predicate: NamedNode, object: Term)
  Quad   = Triple fields + graph_name: GraphName

Fields are exposed directly. Every constructor coerces its arguments through
the field types' ``from_value``, so owned values, views and unions can be
passed interchangeably; anything outside a field's variant set raises
``TypeError``.

``triple.in_graph(name)`` is the one way to place a triple in a graph, and
``quad.to_triple()`` drops the graph name again without touching the other
fields. Rendering follows the rdflib statement form: ``s p o`` for triples
and ``s p o g`` for quads, where the default graph is left out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .borrow import Lease
from .graph_name import GraphName, GraphNameLike, GraphNameRef
from .interchange import RdflibQuad, RdflibTriple, format_quad, format_triple
from .terms import (
    NamedOrBlankNode,
    NamedOrBlankNodeLike,
    NamedOrBlankNodeRef,
    Term,
    TermLike,
    TermRef,
)
from .types import NamedNode, NamedNodeRef, RdfValue


# ---------------------------------------------------------------------------
# Triple
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Triple(RdfValue):
    """An owned RDF triple."""
    subject: NamedOrBlankNode
    predicate: NamedNode
    object: Term

    _family = "triple"

    def __post_init__(self) -> None:
        object.__setattr__(self, "subject", NamedOrBlankNode.from_value(self.subject))
        object.__setattr__(self, "predicate", NamedNode.from_value(self.predicate))
        object.__setattr__(self, "object", Term.from_value(self.object))

    @classmethod
    def new(
        cls,
        subject: NamedOrBlankNodeLike,
        predicate: NamedNode | NamedNodeRef,
        object: TermLike,
    ) -> Triple:
        return cls(subject, predicate, object)

    @classmethod
    def from_quad(cls, quad: Quad | QuadRef) -> Triple:
        """The triple of ``quad``, without its graph name."""
        return cls(quad.subject, quad.predicate, quad.object)

    def in_graph(self, graph_name: GraphNameLike) -> Quad:
        return Quad(self.subject, self.predicate, self.object, GraphName.from_value(graph_name))

    def as_ref(self, *, lease: Lease | None = None) -> TripleRef:
        return TripleRef(
            self.subject.as_ref(lease=lease),
            self.predicate.as_ref(lease=lease),
            self.object.as_ref(lease=lease),
        )

    def to_rdflib(self) -> RdflibTriple:
        return self.as_ref().to_rdflib()

    def _key(self) -> tuple:
        return (self.subject._key(), self.predicate._key(), self.object._key())

    def __iter__(self) -> Iterator[NamedOrBlankNode | NamedNode | Term]:
        yield self.subject
        yield self.predicate
        yield self.object

    def __str__(self) -> str:
        return str(self.as_ref())


@dataclass(frozen=True, eq=False)
class TripleRef(RdfValue):
    """A borrowed RDF triple whose fields are views."""
    subject: NamedOrBlankNodeRef
    predicate: NamedNodeRef
    object: TermRef

    _family = "triple"

    def __post_init__(self) -> None:
        object.__setattr__(self, "subject", NamedOrBlankNodeRef.from_value(self.subject))
        object.__setattr__(self, "predicate", NamedNodeRef.from_value(self.predicate))
        object.__setattr__(self, "object", TermRef.from_value(self.object))

    @classmethod
    def new(
        cls,
        subject: NamedOrBlankNodeLike,
        predicate: NamedNode | NamedNodeRef,
        object: TermLike,
    ) -> TripleRef:
        return cls(subject, predicate, object)

    @classmethod
    def from_quad(cls, quad: Quad | QuadRef) -> TripleRef:
        return cls(quad.subject, quad.predicate, quad.object)

    def in_graph(self, graph_name: GraphNameLike) -> QuadRef:
        return QuadRef(
            self.subject, self.predicate, self.object, GraphNameRef.from_value(graph_name)
        )

    def into_owned(self) -> Triple:
        return Triple(
            self.subject.into_owned(),
            self.predicate.into_owned(),
            self.object.into_owned(),
        )

    def to_rdflib(self) -> RdflibTriple:
        return (
            self.subject.to_rdflib(),
            self.predicate.to_rdflib(),
            self.object.to_rdflib(),
        )

    def _key(self) -> tuple:
        return (self.subject._key(), self.predicate._key(), self.object._key())

    def __iter__(self) -> Iterator[NamedOrBlankNodeRef | NamedNodeRef | TermRef]:
        yield self.subject
        yield self.predicate
        yield self.object

    def __str__(self) -> str:
        return format_triple(self.to_rdflib())


# ---------------------------------------------------------------------------
# Quad
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Quad(RdfValue):
    """An owned triple located in a named graph or the default graph."""
    subject: NamedOrBlankNode
    predicate: NamedNode
    object: Term
    graph_name: GraphName

    _family = "quad"

    def __post_init__(self) -> None:
        object.__setattr__(self, "subject", NamedOrBlankNode.from_value(self.subject))
        object.__setattr__(self, "predicate", NamedNode.from_value(self.predicate))
        object.__setattr__(self, "object", Term.from_value(self.object))
        object.__setattr__(self, "graph_name", GraphName.from_value(self.graph_name))

    @classmethod
    def new(
        cls,
        subject: NamedOrBlankNodeLike,
        predicate: NamedNode | NamedNodeRef,
        object: TermLike,
        graph_name: GraphNameLike,
    ) -> Quad:
        return cls(subject, predicate, object, graph_name)

    def to_triple(self) -> Triple:
        return Triple(self.subject, self.predicate, self.object)

    def as_ref(self, *, lease: Lease | None = None) -> QuadRef:
        return QuadRef(
            self.subject.as_ref(lease=lease),
            self.predicate.as_ref(lease=lease),
            self.object.as_ref(lease=lease),
            self.graph_name.as_ref(lease=lease),
        )

    def to_rdflib(self) -> RdflibQuad:
        return self.as_ref().to_rdflib()

    def _key(self) -> tuple:
        return (
            self.subject._key(),
            self.predicate._key(),
            self.object._key(),
            self.graph_name._key(),
        )

    def __iter__(self) -> Iterator[NamedOrBlankNode | NamedNode | Term | GraphName]:
        yield self.subject
        yield self.predicate
        yield self.object
        yield self.graph_name

    def __str__(self) -> str:
        return str(self.as_ref())


@dataclass(frozen=True, eq=False)
class QuadRef(RdfValue):
    """A borrowed quad whose fields are views."""
    subject: NamedOrBlankNodeRef
    predicate: NamedNodeRef
    object: TermRef
    graph_name: GraphNameRef

    _family = "quad"

    def __post_init__(self) -> None:
        object.__setattr__(self, "subject", NamedOrBlankNodeRef.from_value(self.subject))
        object.__setattr__(self, "predicate", NamedNodeRef.from_value(self.predicate))
        object.__setattr__(self, "object", TermRef.from_value(self.object))
        object.__setattr__(self, "graph_name", GraphNameRef.from_value(self.graph_name))

    @classmethod
    def new(
        cls,
        subject: NamedOrBlankNodeLike,
        predicate: NamedNode | NamedNodeRef,
        object: TermLike,
        graph_name: GraphNameLike,
    ) -> QuadRef:
        return cls(subject, predicate, object, graph_name)

    def to_triple(self) -> TripleRef:
        return TripleRef(self.subject, self.predicate, self.object)

    def into_owned(self) -> Quad:
        return Quad(
            self.subject.into_owned(),
            self.predicate.into_owned(),
            self.object.into_owned(),
            self.graph_name.into_owned(),
        )

    def to_rdflib(self) -> RdflibQuad:
        return (
            self.subject.to_rdflib(),
            self.predicate.to_rdflib(),
            self.object.to_rdflib(),
            self.graph_name.to_rdflib(),
        )

    def _key(self) -> tuple:
        return (
            self.subject._key(),
            self.predicate._key(),
            self.object._key(),
            self.graph_name._key(),
        )

    def __iter__(self) -> Iterator[NamedOrBlankNodeRef | NamedNodeRef | TermRef | GraphNameRef]:
        yield self.subject
        yield self.predicate
        yield self.object
        yield self.graph_name

    def __str__(self) -> str:
        return format_quad(self.to_rdflib())
