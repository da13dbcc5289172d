"""
CLI argument parser configuration.

Command Structure:
    - convert <path> [--output FILE] [--format FMT] [--config FILE]
    - inspect <path> [--format FMT] [--config FILE]
"""

import argparse

from ...constants import FileExtensions


# ============================================================================
# Shared Flag Group Builders
# ============================================================================

def add_input_flags(parser: argparse.ArgumentParser) -> None:
    """Add common input-related flags."""
    parser.add_argument('path', help='Path to the ontology file')
    parser.add_argument(
        '--format',
        dest='rdf_format',
        choices=sorted(set(FileExtensions.RDF_FORMATS.values())),
        help='rdflib serialization format (default: inferred from the file extension)'
    )


def add_config_flags(parser: argparse.ArgumentParser) -> None:
    """Add configuration flags."""
    parser.add_argument(
        '--config', '-c',
        help='Path to configuration file (default: ./owlgraph.json if present)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Override the configured log level'
    )


# ============================================================================
# Main Parser Factory
# ============================================================================

def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        prog='owlgraph',
        description="OWL/RDF ontology to VOWL graph converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Convert an ontology to a VOWL JSON document
    %(prog)s convert ontology.ttl --output ontology.json
    %(prog)s convert ontology.owl --format xml --config owlgraph.json

    # Show registry statistics without writing output
    %(prog)s inspect ontology.ttl
        """,
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    _add_convert_parser(subparsers)
    _add_inspect_parser(subparsers)

    return parser


def _add_convert_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the convert command parser."""
    parser = subparsers.add_parser(
        'convert',
        help='Convert an ontology file to a VOWL JSON document'
    )
    add_input_flags(parser)
    parser.add_argument(
        '--output', '-o',
        help='Output JSON file path (default: <input>.json)'
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help='JSON indentation (default: 2)'
    )
    add_config_flags(parser)


def _add_inspect_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the inspect command parser."""
    parser = subparsers.add_parser(
        'inspect',
        help='Load an ontology and print registry statistics'
    )
    add_input_flags(parser)
    add_config_flags(parser)
