"""Node unions — the subject shape and the object shape of a statement.

  NamedOrBlankNode = NamedNode | BlankNode            (subjects, graph names)
  Term             = NamedNode | BlankNode | Literal  (objects)

Both are tagged variants: a ``kind`` tag plus the ``value`` it selects. The
variant set is closed and checked on construction, so a literal can never end
up in a ``NamedOrBlankNode``. Widening goes one way only:
``Term.from_value(named_or_blank)`` keeps the variant and payload, while
``NamedOrBlankNode.from_value(term)`` raises ``TypeError``.

Each union has a view twin (``NamedOrBlankNodeRef``, ``TermRef``) holding
views of the primitives. ``as_ref()`` and ``into_owned()`` preserve the
variant and payload exactly.
"""

from __future__ import annotations

from dataclasses import dataclass

import rdflib

from .borrow import Lease, View
from .types import (
    BlankNode,
    BlankNodeRef,
    Kind,
    Literal,
    LiteralRef,
    NamedNode,
    NamedNodeRef,
    NodeUnion,
    check_variant,
    view_repr,
)


_NAMED_OR_BLANK = {Kind.NAMED_NODE: NamedNode, Kind.BLANK_NODE: BlankNode}
_NAMED_OR_BLANK_REF = {Kind.NAMED_NODE: NamedNodeRef, Kind.BLANK_NODE: BlankNodeRef}
_TERM = {**_NAMED_OR_BLANK, Kind.LITERAL: Literal}
_TERM_REF = {**_NAMED_OR_BLANK_REF, Kind.LITERAL: LiteralRef}


# ---------------------------------------------------------------------------
# NamedOrBlankNode — subject and graph name shape
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class NamedOrBlankNode(NodeUnion):
    """An owned named node or blank node."""
    kind: Kind
    value: NamedNode | BlankNode

    _family = "named_or_blank_node"

    def __post_init__(self) -> None:
        check_variant("NamedOrBlankNode", _NAMED_OR_BLANK, self.kind, self.value)

    @classmethod
    def from_value(cls, node: NamedOrBlankNodeLike) -> NamedOrBlankNode:
        """Wrap a named or blank node, owned or borrowed, into this union."""
        if isinstance(node, NamedOrBlankNode):
            return node
        if isinstance(node, NamedOrBlankNodeRef):
            return node.into_owned()
        if isinstance(node, (NamedNodeRef, BlankNodeRef)):
            node = node.into_owned()
        if isinstance(node, (NamedNode, BlankNode)):
            return cls(node.kind, node)
        raise TypeError(f"Expected a named node or blank node, got {type(node).__name__}")

    def as_ref(self, *, lease: Lease | None = None) -> NamedOrBlankNodeRef:
        return NamedOrBlankNodeRef(self.kind, self.value.as_ref(lease=lease), lease=lease)

    def to_rdflib(self) -> rdflib.URIRef | rdflib.BNode:
        return self.as_ref().to_rdflib()

    def __repr__(self) -> str:
        return f"NamedOrBlankNode({self.value!r})"


class NamedOrBlankNodeRef(View, NodeUnion):
    """A borrowed named node or blank node."""

    __slots__ = ("_kind", "_value")
    __match_args__ = ("kind", "value")

    _family = "named_or_blank_node"

    def __init__(
        self,
        kind: Kind,
        value: NamedNodeRef | BlankNodeRef,
        *,
        lease: Lease | None = None,
    ) -> None:
        check_variant("NamedOrBlankNodeRef", _NAMED_OR_BLANK_REF, kind, value)
        super().__init__(lease if lease is not None else value.lease)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_value", value)

    @classmethod
    def from_value(cls, node: NamedOrBlankNodeLike) -> NamedOrBlankNodeRef:
        """Borrow a named or blank node, owned or already borrowed."""
        if isinstance(node, NamedOrBlankNodeRef):
            return node
        if isinstance(node, NamedOrBlankNode):
            return node.as_ref()
        if isinstance(node, (NamedNode, BlankNode)):
            node = node.as_ref()
        if isinstance(node, (NamedNodeRef, BlankNodeRef)):
            return cls(node.kind, node)
        raise TypeError(f"Expected a named node or blank node, got {type(node).__name__}")

    @property
    def kind(self) -> Kind:
        self._check()
        return self._kind

    @property
    def value(self) -> NamedNodeRef | BlankNodeRef:
        self._check()
        return self._value

    def into_owned(self) -> NamedOrBlankNode:
        return NamedOrBlankNode(self.kind, self.value.into_owned())

    def to_rdflib(self) -> rdflib.URIRef | rdflib.BNode:
        return self.value.to_rdflib()

    def __repr__(self) -> str:
        return view_repr(self, repr(self._value))


# ---------------------------------------------------------------------------
# Term — object shape
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Term(NodeUnion):
    """An owned named node, blank node or literal."""
    kind: Kind
    value: NamedNode | BlankNode | Literal

    _family = "term"

    def __post_init__(self) -> None:
        check_variant("Term", _TERM, self.kind, self.value)

    @classmethod
    def from_value(cls, term: TermLike) -> Term:
        """Wrap any node, owned or borrowed, into a term.

        A ``NamedOrBlankNode`` widens into the term of the same variant.
        """
        if isinstance(term, Term):
            return term
        if isinstance(term, TermRef):
            return term.into_owned()
        if isinstance(term, NamedOrBlankNodeRef):
            term = term.into_owned()
        if isinstance(term, NamedOrBlankNode):
            return cls(term.kind, term.value)
        if isinstance(term, (NamedNodeRef, BlankNodeRef, LiteralRef)):
            term = term.into_owned()
        if isinstance(term, (NamedNode, BlankNode, Literal)):
            return cls(term.kind, term)
        raise TypeError(f"Expected an RDF term, got {type(term).__name__}")

    def is_literal(self) -> bool:
        return self.kind is Kind.LITERAL

    def as_ref(self, *, lease: Lease | None = None) -> TermRef:
        return TermRef(self.kind, self.value.as_ref(lease=lease), lease=lease)

    def to_rdflib(self) -> rdflib.URIRef | rdflib.BNode | rdflib.Literal:
        return self.as_ref().to_rdflib()

    def __repr__(self) -> str:
        return f"Term({self.value!r})"


class TermRef(View, NodeUnion):
    """A borrowed named node, blank node or literal."""

    __slots__ = ("_kind", "_value")
    __match_args__ = ("kind", "value")

    _family = "term"

    def __init__(
        self,
        kind: Kind,
        value: NamedNodeRef | BlankNodeRef | LiteralRef,
        *,
        lease: Lease | None = None,
    ) -> None:
        check_variant("TermRef", _TERM_REF, kind, value)
        super().__init__(lease if lease is not None else value.lease)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_value", value)

    @classmethod
    def from_value(cls, term: TermLike) -> TermRef:
        if isinstance(term, TermRef):
            return term
        if isinstance(term, Term):
            return term.as_ref()
        if isinstance(term, NamedOrBlankNode):
            term = term.as_ref()
        if isinstance(term, NamedOrBlankNodeRef):
            return cls(term.kind, term.value)
        if isinstance(term, (NamedNode, BlankNode, Literal)):
            term = term.as_ref()
        if isinstance(term, (NamedNodeRef, BlankNodeRef, LiteralRef)):
            return cls(term.kind, term)
        raise TypeError(f"Expected an RDF term, got {type(term).__name__}")

    @property
    def kind(self) -> Kind:
        self._check()
        return self._kind

    @property
    def value(self) -> NamedNodeRef | BlankNodeRef | LiteralRef:
        self._check()
        return self._value

    def is_literal(self) -> bool:
        return self.kind is Kind.LITERAL

    def into_owned(self) -> Term:
        return Term(self.kind, self.value.into_owned())

    def to_rdflib(self) -> rdflib.URIRef | rdflib.BNode | rdflib.Literal:
        return self.value.to_rdflib()

    def __repr__(self) -> str:
        return view_repr(self, repr(self._value))


# Anything the union constructors accept.
NamedOrBlankNodeLike = (
    NamedNode | NamedNodeRef | BlankNode | BlankNodeRef
    | NamedOrBlankNode | NamedOrBlankNodeRef
)
TermLike = NamedOrBlankNodeLike | Literal | LiteralRef | Term | TermRef
