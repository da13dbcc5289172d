"""
RDF input: parsing and registry population.

Usage:
    from owlgraph.formats.rdf import RDFGraphParser, OntologyLoader

    graph, _ = RDFGraphParser.parse_file("ontology.ttl")
    OntologyLoader(registry).load(graph)
"""

from .graph_parser import RDFGraphParser
from .ontology_loader import OntologyLoader, collect_annotations

__all__ = [
    'RDFGraphParser',
    'OntologyLoader',
    'collect_annotations',
]
