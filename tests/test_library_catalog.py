"""End-to-end tests for the Library Catalog case study."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from rdfmodel.borrow import ReleasedViewError, borrowed
from rdfmodel.graph_name import DEFAULT_GRAPH
from rdfmodel.rdflib_bridge import dataset_to_quads, quads_to_dataset
from rdfmodel.statements import Triple

from case_studies.library_catalog.domain import (
    LOANS,
    build_catalog,
    build_holdings,
    build_loans,
)


@pytest.fixture
def catalog():
    return build_catalog()


class TestCatalogConstruction:
    def test_quad_count(self, catalog):
        assert len(catalog) == len(build_holdings()) + len(build_loans())

    def test_holdings_in_default_graph(self, catalog):
        default = [q for q in catalog if q.graph_name == DEFAULT_GRAPH]
        assert [q.to_triple() for q in default] == build_holdings()

    def test_loans_in_named_graph(self, catalog):
        loans = [q for q in catalog if q.graph_name == LOANS]
        assert len(loans) == 1
        assert loans[0].object.is_named_node()

    def test_acquisition_record_is_blank(self, catalog):
        blank_subjects = {q.subject for q in catalog if q.subject.is_blank_node()}
        assert len(blank_subjects) == 1


class TestCatalogRendering:
    def test_loan_rendering(self, catalog):
        loan = next(q for q in catalog if q.graph_name == LOANS)
        assert str(loan) == (
            "<http://library.example.org/book/dune> "
            "<http://library.example.org/borrowedBy> "
            "<http://library.example.org/patron/ada> "
            "<http://library.example.org/graph/loans>"
        )

    def test_default_graph_rendering_matches_triple(self, catalog):
        for quad in catalog:
            if quad.graph_name.is_default_graph():
                assert str(quad) == str(Triple.from_quad(quad))


class TestCatalogViews:
    def test_views_expire(self, catalog):
        with borrowed(catalog[0]) as view:
            assert view == catalog[0]
        with pytest.raises(ReleasedViewError):
            view.into_owned()


class TestCatalogRdflib:
    def test_dataset_round_trip(self, catalog):
        assert set(dataset_to_quads(quads_to_dataset(catalog))) == set(catalog)

    def test_serializes_as_nquads(self, catalog):
        text = quads_to_dataset(catalog).serialize(format="nquads")
        assert "<http://library.example.org/graph/loans>" in text
        assert '"Dune"@en' in text
