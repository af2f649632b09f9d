"""Library Catalog — end-to-end demonstration of the RDF value model.

Walks the catalog through the model's layers:

  STEP 1 — Owned statements
    Quads built from primitives, rendered in their debug form.

  STEP 2 — Borrowed views
    A scoped view over each quad, used for reading, then released.

  STEP 3 — Hand-off to rdflib
    The quads converted into an rdflib Dataset and serialized as N-Quads,
    then read back into the model.

Run from the repository root:

  python -m case_studies.library_catalog.run
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from rdfmodel.borrow import ReleasedViewError, borrowed
from rdfmodel.rdflib_bridge import dataset_to_quads, quads_to_dataset

from .domain import build_catalog


def print_header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def run_owned(quads) -> None:
    print_header("STEP 1: Owned statements")
    for quad in quads:
        graph = "default" if quad.graph_name.is_default_graph() else str(quad.graph_name)
        print(f"  [{graph}] {quad.to_triple()}")


def run_borrowed(quads) -> None:
    print_header("STEP 2: Borrowed views")
    literals = 0
    last_view = None
    for quad in quads:
        with borrowed(quad) as view:
            if view.object.is_literal():
                literals += 1
            last_view = view
    print(f"  Quads with a literal object: {literals}")
    try:
        str(last_view)
    except ReleasedViewError as e:
        print(f"  Using a view after its scope: {e}")


def run_rdflib(quads) -> None:
    print_header("STEP 3: Hand-off to rdflib")
    dataset = quads_to_dataset(quads)
    print(dataset.serialize(format="nquads"))
    restored = set(dataset_to_quads(dataset))
    status = "IDENTICAL" if restored == set(quads) else "DIFFERENT"
    print(f"  Read back {len(restored)} quads: {status}")


def main():
    quads = build_catalog()
    run_owned(quads)
    run_borrowed(quads)
    run_rdflib(quads)


if __name__ == "__main__":
    main()
