"""
Conversion pipeline.

One conversion run owns exactly one :class:`EntityRegistry`:

    parse -> load (write phase) -> complete endpoints -> serialize (read phase)

The registry is discarded with the result; nothing is cached between runs.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from rdflib import Graph

from ..formats.rdf import OntologyLoader, RDFGraphParser
from ..formats.vowl import ThingProvider, VowlSerializer
from ..registry import EntityRegistry, RegistryConfig

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """
    Outcome of one conversion run.

    Attributes:
        document: The serialized VOWL graph document.
        statistics: Registry counts after serialization.
        triple_count: Number of triples in the source graph.
        source_path: Input file, when converting from disk.
    """
    document: Dict[str, Any]
    statistics: Dict[str, int] = field(default_factory=dict)
    triple_count: int = 0
    source_path: Optional[str] = None

    def get_summary(self) -> str:
        """Return a human-readable summary."""
        lines = []
        if self.source_path:
            lines.append(f"Source: {self.source_path}")
        lines.append(f"Triples: {self.triple_count}")
        for name, count in self.statistics.items():
            lines.append(f"  {name.replace('_', ' ')}: {count}")
        return "\n".join(lines)


def convert_graph(
    graph: Graph,
    config: Optional[RegistryConfig] = None,
) -> ConversionResult:
    """
    Convert a parsed graph into a VOWL document.

    Raises:
        RegistryError: If a later stage references an IRI the loader never registered.
    """
    registry = EntityRegistry(config)
    loader = OntologyLoader(registry)
    loader.load(graph)

    ThingProvider(registry).add_missing_endpoints()

    serializer = VowlSerializer(registry, ontology_iri=loader.ontology_iri, title=loader.title)
    document = serializer.serialize()

    return ConversionResult(
        document=document,
        statistics=registry.statistics(),
        triple_count=len(graph),
    )


def convert_content(
    content: str,
    rdf_format: str = RDFGraphParser.DEFAULT_FORMAT,
    config: Optional[RegistryConfig] = None,
) -> ConversionResult:
    """Parse serialized RDF and convert it."""
    graph, _ = RDFGraphParser.parse_content(content, rdf_format=rdf_format)
    return convert_graph(graph, config)


def convert_file(
    file_path: str,
    rdf_format: Optional[str] = None,
    config: Optional[RegistryConfig] = None,
) -> ConversionResult:
    """Parse an ontology file and convert it."""
    graph, _ = RDFGraphParser.parse_file(file_path, rdf_format=rdf_format)
    result = convert_graph(graph, config)
    result.source_path = file_path
    logger.info(f"Converted {file_path}")
    return result
