"""
Inspect command: load an ontology and report registry statistics.
"""

import argparse
import logging

from .base import BaseCommand
from ..helpers import format_count_summary, print_footer, print_header
from ....constants import ExitCode
from ....formats.rdf import OntologyLoader, RDFGraphParser
from ....registry import EntityRegistry


logger = logging.getLogger(__name__)


class InspectCommand(BaseCommand):
    """
    Print per-kind entity counts and observed languages.

    Usage:
        inspect <path> [--format FMT]
    """

    def run(self, args: argparse.Namespace) -> int:
        graph, triple_count = RDFGraphParser.parse_file(args.path, rdf_format=args.rdf_format)

        registry = EntityRegistry(self.registry_config)
        loader = OntologyLoader(registry)
        loader.load(graph)

        print_header(f"Ontology: {loader.ontology_iri or args.path}")
        print(f"Triples: {triple_count}")
        print(format_count_summary(registry.statistics()))
        languages = sorted(registry.get_languages())
        print(f"Languages: {', '.join(languages) if languages else '(none)'}")
        print_footer()
        return ExitCode.SUCCESS
