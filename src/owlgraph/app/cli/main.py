"""
Command-line entry point.

Usage:
    owlgraph convert <ontology> [--output <output.json>] [--config <owlgraph.json>]
    owlgraph inspect <ontology>
"""

import sys
from typing import List, Optional

from .commands import ConvertCommand, InspectCommand
from .parsers import create_argument_parser
from ...constants import ExitCode

COMMANDS = {
    'convert': ConvertCommand,
    'inspect': InspectCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.ERROR

    command = COMMANDS[args.command](config_path=getattr(args, 'config', None))
    return int(command.execute(args))


if __name__ == '__main__':
    sys.exit(main())
