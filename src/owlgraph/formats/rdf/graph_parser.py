"""
RDF Graph Parser Module

This module handles RDF parsing into an rdflib graph with input validation
and helpful error messages.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from rdflib import Graph

from ...constants import FileExtensions, ProcessingLimits

logger = logging.getLogger(__name__)


class RDFGraphParser:
    """
    Handles RDF parsing and validation.

    This class encapsulates the graph parsing logic, including:
    - Serialization format inference from file extensions
    - Empty content detection
    - Translation of rdflib parse failures into ``ValueError``
    """

    DEFAULT_FORMAT = 'turtle'

    @staticmethod
    def infer_format_from_path(file_path: str) -> str:
        """
        Infer the rdflib format name from a file extension.

        Args:
            file_path: Path to the ontology file

        Returns:
            rdflib format name, ``turtle`` when the extension is unknown
        """
        suffix = Path(file_path).suffix.lower()
        return FileExtensions.RDF_FORMATS.get(suffix, RDFGraphParser.DEFAULT_FORMAT)

    @staticmethod
    def parse_content(
        content: str,
        rdf_format: str = DEFAULT_FORMAT,
    ) -> Tuple[Graph, int]:
        """
        Parse RDF content into a graph.

        Args:
            content: The serialized RDF content
            rdf_format: rdflib format name

        Returns:
            Tuple of (parsed Graph, triple count)

        Raises:
            ValueError: If content is empty, has invalid syntax or holds no triples
        """
        logger.info(f"Parsing {rdf_format} content...")

        if not content or not content.strip():
            raise ValueError("Empty RDF content provided")

        graph = Graph()
        try:
            graph.parse(data=content, format=rdf_format)
        except Exception as e:
            logger.error(f"Failed to parse RDF content: {e}")
            raise ValueError(f"Invalid RDF syntax: {e}") from e

        triple_count = len(graph)
        if triple_count == 0:
            logger.warning("Parsed graph is empty - no triples found")
            raise ValueError("No RDF triples found in the provided content")

        RDFGraphParser._log_size(triple_count)
        return graph, triple_count

    @staticmethod
    def parse_file(
        file_path: str,
        rdf_format: Optional[str] = None,
    ) -> Tuple[Graph, int]:
        """
        Parse an RDF file into a graph.

        Args:
            file_path: Path to the ontology file
            rdf_format: rdflib format name; inferred from the extension if omitted

        Returns:
            Tuple of (parsed Graph, triple count)

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file has invalid syntax or holds no triples
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        fmt = rdf_format or RDFGraphParser.infer_format_from_path(file_path)
        logger.info(f"Parsing {path.name} as {fmt} ({path.stat().st_size / 1024:.1f} KB)")

        graph = Graph()
        try:
            graph.parse(str(path), format=fmt)
        except Exception as e:
            logger.error(f"Failed to parse RDF file: {e}")
            raise ValueError(f"Invalid RDF syntax in {file_path}: {e}") from e

        triple_count = len(graph)
        if triple_count == 0:
            raise ValueError(f"No RDF triples found in {file_path}")

        RDFGraphParser._log_size(triple_count)
        return graph, triple_count

    @staticmethod
    def _log_size(triple_count: int) -> None:
        logger.info(f"Successfully parsed {triple_count} triples")
        if triple_count > ProcessingLimits.LARGE_GRAPH_TRIPLES:
            logger.warning(
                f"Large ontology detected ({triple_count} triples). "
                "Processing may take several minutes."
            )
