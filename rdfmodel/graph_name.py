"""Graph names — which partition of a dataset a statement belongs to.

  GraphName = NamedNode | BlankNode | DefaultGraph

The default graph carries no payload. ``GraphName`` is isomorphic to
``NamedOrBlankNode | None``, with None standing for the default graph:

  GraphName.from_option(None)          → DEFAULT_GRAPH
  GraphName.from_option(node)          → named/blank variant holding node
  name.to_option()                     → the exact inverse

``str(DEFAULT_GRAPH)`` is the bare token ``DEFAULT``. That is a debug
rendering only; the rdflib conversion maps the default graph to None.
"""

from __future__ import annotations

from dataclasses import dataclass

import rdflib

from .borrow import Lease, View
from .terms import NamedOrBlankNode, NamedOrBlankNodeLike, NamedOrBlankNodeRef
from .types import (
    BlankNode,
    BlankNodeRef,
    Kind,
    NamedNode,
    NamedNodeRef,
    NodeUnion,
    check_variant,
    view_repr,
)


DEFAULT_GRAPH_TOKEN = "DEFAULT"

_GRAPH_NAME = {
    Kind.NAMED_NODE: NamedNode,
    Kind.BLANK_NODE: BlankNode,
    Kind.DEFAULT_GRAPH: type(None),
}
_GRAPH_NAME_REF = {
    Kind.NAMED_NODE: NamedNodeRef,
    Kind.BLANK_NODE: BlankNodeRef,
    Kind.DEFAULT_GRAPH: type(None),
}


# ---------------------------------------------------------------------------
# GraphName
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class GraphName(NodeUnion):
    """An owned graph name. ``GraphName()`` is the default graph."""
    kind: Kind = Kind.DEFAULT_GRAPH
    value: NamedNode | BlankNode | None = None

    _family = "graph_name"

    def __post_init__(self) -> None:
        check_variant("GraphName", _GRAPH_NAME, self.kind, self.value)

    @classmethod
    def default(cls) -> GraphName:
        return DEFAULT_GRAPH

    @classmethod
    def from_option(cls, node: NamedOrBlankNodeLike | None) -> GraphName:
        """Map None to the default graph and a node to its graph name."""
        if node is None:
            return DEFAULT_GRAPH
        node = NamedOrBlankNode.from_value(node)
        return cls(node.kind, node.value)

    @classmethod
    def from_value(cls, name: GraphNameLike) -> GraphName:
        """Accept a graph name, a named or blank node (owned or borrowed),
        or None for the default graph."""
        if isinstance(name, GraphName):
            return name
        if isinstance(name, GraphNameRef):
            return name.into_owned()
        return cls.from_option(name)

    def is_default_graph(self) -> bool:
        return self.kind is Kind.DEFAULT_GRAPH

    def to_option(self) -> NamedOrBlankNode | None:
        if self.is_default_graph():
            return None
        return NamedOrBlankNode(self.kind, self.value)

    def as_ref(self, *, lease: Lease | None = None) -> GraphNameRef:
        if self.value is None:
            return GraphNameRef(lease=lease)
        return GraphNameRef(self.kind, self.value.as_ref(lease=lease), lease=lease)

    def to_rdflib(self) -> rdflib.URIRef | rdflib.BNode | None:
        return self.as_ref().to_rdflib()

    def __str__(self) -> str:
        if self.is_default_graph():
            return DEFAULT_GRAPH_TOKEN
        return str(self.value)

    def __repr__(self) -> str:
        if self.is_default_graph():
            return f"GraphName({DEFAULT_GRAPH_TOKEN})"
        return f"GraphName({self.value!r})"


DEFAULT_GRAPH = GraphName()


class GraphNameRef(View, NodeUnion):
    """A borrowed graph name. ``GraphNameRef()`` is the default graph."""

    __slots__ = ("_kind", "_value")
    __match_args__ = ("kind", "value")

    _family = "graph_name"

    def __init__(
        self,
        kind: Kind = Kind.DEFAULT_GRAPH,
        value: NamedNodeRef | BlankNodeRef | None = None,
        *,
        lease: Lease | None = None,
    ) -> None:
        check_variant("GraphNameRef", _GRAPH_NAME_REF, kind, value)
        if lease is None and value is not None:
            lease = value.lease
        super().__init__(lease)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_value", value)

    @classmethod
    def default(cls) -> GraphNameRef:
        return cls()

    @classmethod
    def from_option(cls, node: NamedOrBlankNodeLike | None) -> GraphNameRef:
        if node is None:
            return cls()
        node = NamedOrBlankNodeRef.from_value(node)
        return cls(node.kind, node.value)

    @classmethod
    def from_value(cls, name: GraphNameLike) -> GraphNameRef:
        if isinstance(name, GraphNameRef):
            return name
        if isinstance(name, GraphName):
            return name.as_ref()
        return cls.from_option(name)

    @property
    def kind(self) -> Kind:
        self._check()
        return self._kind

    @property
    def value(self) -> NamedNodeRef | BlankNodeRef | None:
        self._check()
        return self._value

    def is_default_graph(self) -> bool:
        return self.kind is Kind.DEFAULT_GRAPH

    def to_option(self) -> NamedOrBlankNodeRef | None:
        if self.is_default_graph():
            return None
        return NamedOrBlankNodeRef(self.kind, self.value)

    def into_owned(self) -> GraphName:
        value = self.value
        if value is None:
            return DEFAULT_GRAPH
        return GraphName(self.kind, value.into_owned())

    def to_rdflib(self) -> rdflib.URIRef | rdflib.BNode | None:
        value = self.value
        return None if value is None else value.to_rdflib()

    def __str__(self) -> str:
        if self.is_default_graph():
            return DEFAULT_GRAPH_TOKEN
        return str(self.value)

    def __repr__(self) -> str:
        if self._value is None:
            return view_repr(self, DEFAULT_GRAPH_TOKEN)
        return view_repr(self, repr(self._value))


GraphNameLike = NamedOrBlankNodeLike | GraphName | GraphNameRef | None
