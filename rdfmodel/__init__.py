"""rdfmodel — the RDF value model: nodes, terms, triples and quads.

Every higher layer (parsers, stores, query evaluators, serializers) shares
these types. Each comes in two flavors with total conversions between them:
an owned value for long-lived storage and a borrowed view, from ``as_ref()``,
for hot-path reading and writing.

- types:        primitive nodes (NamedNode, BlankNode, Literal) and their views
- terms:        NamedOrBlankNode (subject shape) and Term (object shape)
- graph_name:   GraphName — named graph, blank graph or the default graph
- statements:   Triple and Quad
- borrow:       scoped views that fail loudly once their scope has ended
- interchange:  rdflib as the interchange representation and text formatter
- rdflib_bridge: rdflib → model conversions, Graph and Dataset hand-off

The unions are closed tagged variants: a literal cannot become a subject,
predicate or graph name. Nothing here validates RDF syntax; inputs are taken
as already valid.
"""
