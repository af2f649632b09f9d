"""Library Catalog — statements describing a small book collection.

Case Study: a catalog split across two graphs.

- Default graph: what the library holds (books, titles, authors)
- Named graph <http://library.example.org/graph/loans>: who borrowed what

This exercises every part of the model:
- Named and blank subjects (a book's anonymous acquisition record)
- Simple, language-tagged and typed literals
- Quads in the default graph and in a named graph
- Stripping quads back to triples for a graph-agnostic view
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from rdfmodel.graph_name import DEFAULT_GRAPH, GraphName
from rdfmodel.statements import Quad, Triple
from rdfmodel.types import RDF_TYPE, XSD_INTEGER, BlankNode, Literal, NamedNode


LIB = "http://library.example.org/"

BOOK = NamedNode(f"{LIB}Book")
TITLE = NamedNode(f"{LIB}title")
AUTHOR = NamedNode(f"{LIB}author")
PAGES = NamedNode(f"{LIB}pages")
ACQUIRED = NamedNode(f"{LIB}acquired")
SOURCE = NamedNode(f"{LIB}source")
BORROWED_BY = NamedNode(f"{LIB}borrowedBy")

LOANS = GraphName.from_value(NamedNode(f"{LIB}graph/loans"))


def build_holdings() -> list[Triple]:
    """Build the holdings: two books, one with an acquisition record."""
    dune = NamedNode(f"{LIB}book/dune")
    solaris = NamedNode(f"{LIB}book/solaris")
    acquisition = BlankNode("acq1")

    return [
        Triple(dune, RDF_TYPE, BOOK),
        Triple(dune, TITLE, Literal.language_tagged("Dune", "en")),
        Triple(dune, AUTHOR, Literal.simple("Frank Herbert")),
        Triple(dune, PAGES, Literal.typed("412", XSD_INTEGER)),
        Triple(dune, ACQUIRED, acquisition),
        Triple(acquisition, SOURCE, Literal.simple("donation")),
        Triple(solaris, RDF_TYPE, BOOK),
        Triple(solaris, TITLE, Literal.language_tagged("Solaris", "pl")),
        Triple(solaris, AUTHOR, Literal.simple("Stanisław Lem")),
    ]


def build_loans() -> list[Triple]:
    """Build the loan records: one patron has borrowed Dune."""
    return [
        Triple(NamedNode(f"{LIB}book/dune"), BORROWED_BY, NamedNode(f"{LIB}patron/ada")),
    ]


def build_catalog() -> list[Quad]:
    """Place holdings in the default graph and loans in the loans graph."""
    quads = [triple.in_graph(DEFAULT_GRAPH) for triple in build_holdings()]
    quads += [triple.in_graph(LOANS) for triple in build_loans()]
    return quads
