"""
Convert command: ontology file to VOWL JSON document.
"""

import argparse
from pathlib import Path

from .base import BaseCommand
from ..helpers import print_footer, print_header
from ....constants import ExitCode
from ....core import convert_file
from ....formats.vowl import write_document


class ConvertCommand(BaseCommand):
    """
    Convert one ontology file.

    Usage:
        convert <path> [--output FILE] [--format FMT]
    """

    def run(self, args: argparse.Namespace) -> int:
        print(f"✓ Converting ontology file: {args.path}")
        result = convert_file(args.path, rdf_format=args.rdf_format, config=self.registry_config)

        output_path = Path(args.output) if args.output else Path(args.path).with_suffix('.json')
        write_document(result.document, str(output_path), indent=args.indent)

        print_header("Conversion summary")
        print(result.get_summary())
        print_footer()
        print(f"✓ Saved VOWL document to: {output_path}")
        return ExitCode.SUCCESS
