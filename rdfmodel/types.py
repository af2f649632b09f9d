"""Primitive RDF nodes — named nodes, blank nodes and literals.

These are the leaves every other type in the package is built from. Each
comes as an owned value (a frozen dataclass) and a borrowed view (a slotted
handle from ``as_ref()``):

  NamedNode  / NamedNodeRef  — an IRI
  BlankNode  / BlankNodeRef  — a locally scoped node identifier
  Literal    / LiteralRef    — lexical form + datatype IRI + optional language

No syntax validation is done here: IRIs, blank node identifiers and language
tags are taken as given. Equality and hashing are payload based and hold
across flavors, so ``NamedNode(iri) == NamedNodeRef(iri)``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any

import rdflib

from .borrow import Lease, View
from .interchange import format_node


# ---------------------------------------------------------------------------
# Kind — the variant tag shared by every node union
# ---------------------------------------------------------------------------

class Kind(Enum):
    """Which variant of a node union is active."""
    NAMED_NODE = "named_node"
    BLANK_NODE = "blank_node"
    LITERAL = "literal"
    DEFAULT_GRAPH = "default_graph"


# ---------------------------------------------------------------------------
# RdfValue — equality and hashing shared by owned values and their views
# ---------------------------------------------------------------------------

class RdfValue:
    """Mixin comparing values by family and payload key.

    An owned value and its view belong to the same family, so they compare
    equal and hash identically when their payloads match. Values of
    different families (a ``Triple`` and a ``Quad``, a ``Term`` and a
    ``NamedOrBlankNode``) never compare equal.
    """

    __slots__ = ()

    _family = ""

    def _key(self) -> tuple:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RdfValue) or other._family != self._family:
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self._family, self._key()))


def view_repr(view: View, payload: str) -> str:
    if view.released:
        return f"{type(view).__name__}(<released>)"
    return f"{type(view).__name__}({payload})"


# ---------------------------------------------------------------------------
# NamedNode — an IRI
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class NamedNode(RdfValue):
    """An owned IRI node, rendered as ``<iri>``."""
    iri: str

    _family = "named_node"
    kind = Kind.NAMED_NODE

    @classmethod
    def from_value(cls, node: NamedNode | NamedNodeRef) -> NamedNode:
        if isinstance(node, NamedNode):
            return node
        if isinstance(node, NamedNodeRef):
            return node.into_owned()
        raise TypeError(f"Expected a named node, got {type(node).__name__}")

    def as_str(self) -> str:
        return self.iri

    def as_ref(self, *, lease: Lease | None = None) -> NamedNodeRef:
        return NamedNodeRef(self.iri, lease=lease)

    def to_rdflib(self) -> rdflib.URIRef:
        return self.as_ref().to_rdflib()

    def _key(self) -> tuple:
        return (self.iri,)

    def __str__(self) -> str:
        return str(self.as_ref())


class NamedNodeRef(View, RdfValue):
    """A borrowed IRI node."""

    __slots__ = ("_iri",)
    __match_args__ = ("iri",)

    _family = "named_node"
    kind = Kind.NAMED_NODE

    def __init__(self, iri: str, *, lease: Lease | None = None) -> None:
        super().__init__(lease)
        object.__setattr__(self, "_iri", iri)

    @classmethod
    def from_value(cls, node: NamedNode | NamedNodeRef) -> NamedNodeRef:
        if isinstance(node, NamedNodeRef):
            return node
        if isinstance(node, NamedNode):
            return node.as_ref()
        raise TypeError(f"Expected a named node, got {type(node).__name__}")

    @property
    def iri(self) -> str:
        self._check()
        return self._iri

    def as_str(self) -> str:
        return self.iri

    def into_owned(self) -> NamedNode:
        return NamedNode(self.iri)

    def to_rdflib(self) -> rdflib.URIRef:
        return rdflib.URIRef(self.iri)

    def _key(self) -> tuple:
        return (self.iri,)

    def __str__(self) -> str:
        return format_node(self.to_rdflib())

    def __repr__(self) -> str:
        return view_repr(self, repr(self._iri))


# ---------------------------------------------------------------------------
# Well-known IRIs
# ---------------------------------------------------------------------------

RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
XSD = "http://www.w3.org/2001/XMLSchema#"

RDF_TYPE = NamedNode(f"{RDF}type")
RDF_LANG_STRING = NamedNode(f"{RDF}langString")

XSD_STRING = NamedNode(f"{XSD}string")
XSD_BOOLEAN = NamedNode(f"{XSD}boolean")
XSD_INTEGER = NamedNode(f"{XSD}integer")
XSD_DECIMAL = NamedNode(f"{XSD}decimal")
XSD_DOUBLE = NamedNode(f"{XSD}double")


# ---------------------------------------------------------------------------
# BlankNode — an anonymous node
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class BlankNode(RdfValue):
    """An owned blank node, rendered as ``_:id``."""
    id: str

    _family = "blank_node"
    kind = Kind.BLANK_NODE

    @classmethod
    def fresh(cls) -> BlankNode:
        """A blank node with a new random 128-bit hexadecimal identifier."""
        return cls(uuid.uuid4().hex)

    @classmethod
    def from_value(cls, node: BlankNode | BlankNodeRef) -> BlankNode:
        if isinstance(node, BlankNode):
            return node
        if isinstance(node, BlankNodeRef):
            return node.into_owned()
        raise TypeError(f"Expected a blank node, got {type(node).__name__}")

    def as_str(self) -> str:
        return self.id

    def as_ref(self, *, lease: Lease | None = None) -> BlankNodeRef:
        return BlankNodeRef(self.id, lease=lease)

    def to_rdflib(self) -> rdflib.BNode:
        return self.as_ref().to_rdflib()

    def _key(self) -> tuple:
        return (self.id,)

    def __str__(self) -> str:
        return str(self.as_ref())


class BlankNodeRef(View, RdfValue):
    """A borrowed blank node."""

    __slots__ = ("_id",)
    __match_args__ = ("id",)

    _family = "blank_node"
    kind = Kind.BLANK_NODE

    def __init__(self, id: str, *, lease: Lease | None = None) -> None:
        super().__init__(lease)
        object.__setattr__(self, "_id", id)

    @classmethod
    def from_value(cls, node: BlankNode | BlankNodeRef) -> BlankNodeRef:
        if isinstance(node, BlankNodeRef):
            return node
        if isinstance(node, BlankNode):
            return node.as_ref()
        raise TypeError(f"Expected a blank node, got {type(node).__name__}")

    @property
    def id(self) -> str:
        self._check()
        return self._id

    def as_str(self) -> str:
        return self.id

    def into_owned(self) -> BlankNode:
        return BlankNode(self.id)

    def to_rdflib(self) -> rdflib.BNode:
        return rdflib.BNode(self.id)

    def _key(self) -> tuple:
        return (self.id,)

    def __str__(self) -> str:
        return format_node(self.to_rdflib())

    def __repr__(self) -> str:
        return view_repr(self, repr(self._id))


# ---------------------------------------------------------------------------
# Literal — lexical form, datatype and optional language tag
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Literal(RdfValue):
    """An owned literal.

    The datatype defaults to ``xsd:string``. A language tag always makes it
    ``rdf:langString``. The lexical form is kept exactly as passed.
    """
    value: str
    datatype: NamedNode = XSD_STRING
    language: str | None = None

    _family = "literal"
    kind = Kind.LITERAL

    def __post_init__(self) -> None:
        datatype = NamedNode.from_value(self.datatype)
        if self.language is not None:
            datatype = RDF_LANG_STRING
        object.__setattr__(self, "datatype", datatype)

    @classmethod
    def simple(cls, value: str) -> Literal:
        return cls(value)

    @classmethod
    def typed(cls, value: str, datatype: NamedNode | NamedNodeRef) -> Literal:
        return cls(value, NamedNode.from_value(datatype))

    @classmethod
    def language_tagged(cls, value: str, language: str) -> Literal:
        return cls(value, RDF_LANG_STRING, language)

    @classmethod
    def from_value(cls, literal: Literal | LiteralRef) -> Literal:
        if isinstance(literal, Literal):
            return literal
        if isinstance(literal, LiteralRef):
            return literal.into_owned()
        raise TypeError(f"Expected a literal, got {type(literal).__name__}")

    def is_plain(self) -> bool:
        """True for simple (``xsd:string``) and language-tagged literals."""
        return self.language is not None or self.datatype == XSD_STRING

    def as_ref(self, *, lease: Lease | None = None) -> LiteralRef:
        return LiteralRef(
            self.value,
            self.datatype.as_ref(lease=lease),
            self.language,
            lease=lease,
        )

    def to_rdflib(self) -> rdflib.Literal:
        return self.as_ref().to_rdflib()

    def _key(self) -> tuple:
        return (self.value, self.datatype.iri, self.language)

    def __str__(self) -> str:
        return str(self.as_ref())


class LiteralRef(View, RdfValue):
    """A borrowed literal."""

    __slots__ = ("_value", "_datatype", "_language")
    __match_args__ = ("value", "datatype", "language")

    _family = "literal"
    kind = Kind.LITERAL

    def __init__(
        self,
        value: str,
        datatype: NamedNodeRef | NamedNode | None = None,
        language: str | None = None,
        *,
        lease: Lease | None = None,
    ) -> None:
        super().__init__(lease)
        if language is not None:
            datatype = RDF_LANG_STRING
        elif datatype is None:
            datatype = XSD_STRING
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_datatype", NamedNodeRef.from_value(datatype))
        object.__setattr__(self, "_language", language)

    @classmethod
    def from_value(cls, literal: Literal | LiteralRef) -> LiteralRef:
        if isinstance(literal, LiteralRef):
            return literal
        if isinstance(literal, Literal):
            return literal.as_ref()
        raise TypeError(f"Expected a literal, got {type(literal).__name__}")

    @property
    def value(self) -> str:
        self._check()
        return self._value

    @property
    def datatype(self) -> NamedNodeRef:
        self._check()
        return self._datatype

    @property
    def language(self) -> str | None:
        self._check()
        return self._language

    def is_plain(self) -> bool:
        return self.language is not None or self.datatype == XSD_STRING

    def into_owned(self) -> Literal:
        return Literal(self.value, self.datatype.into_owned(), self.language)

    def to_rdflib(self) -> rdflib.Literal:
        """The rdflib literal with the same lexical form, datatype and language.

        Simple literals map to datatype-less rdflib literals and
        language-tagged ones carry only ``lang``, which is how rdflib models
        both. Lexical normalization is disabled.
        """
        value, language = self.value, self.language
        if language is not None:
            return rdflib.Literal(value, lang=language)
        datatype = self.datatype.iri
        if datatype == XSD_STRING.iri:
            return rdflib.Literal(value)
        return rdflib.Literal(value, datatype=rdflib.URIRef(datatype), normalize=False)

    def _key(self) -> tuple:
        return (self.value, self.datatype.iri, self.language)

    def __str__(self) -> str:
        return format_node(self.to_rdflib())

    def __repr__(self) -> str:
        payload: list[Any] = [repr(self._value), repr(self._datatype._iri)]
        if self._language is not None:
            payload.append(repr(self._language))
        return view_repr(self, ", ".join(payload))


# ---------------------------------------------------------------------------
# Node unions — shared behavior of the tagged unions built on these nodes
# ---------------------------------------------------------------------------

def check_variant(union: str, variants: dict[Kind, type], kind: Kind, value: object) -> None:
    """Reject a (kind, value) pair outside a union's closed variant set."""
    expected = variants.get(kind)
    if expected is None:
        raise TypeError(f"{union} has no {kind.name} variant")
    if not isinstance(value, expected):
        raise TypeError(
            f"{union} {kind.name} variant holds {expected.__name__}, "
            f"got {type(value).__name__}"
        )


class NodeUnion(RdfValue):
    """Behavior common to ``NamedOrBlankNode``, ``Term``, ``GraphName`` and
    their views: a ``kind`` tag plus the primitive ``value`` it selects.
    """

    __slots__ = ()

    kind: Kind
    value: Any

    def is_named_node(self) -> bool:
        return self.kind is Kind.NAMED_NODE

    def is_blank_node(self) -> bool:
        return self.kind is Kind.BLANK_NODE

    def _key(self) -> tuple:
        value = self.value
        return (self.kind, None if value is None else value._key())

    def __str__(self) -> str:
        return str(self.value)
