"""
CLI command implementations.

- base.py: BaseCommand with config, logging and error handling
- convert.py: ConvertCommand
- inspect_command.py: InspectCommand
"""

from .base import BaseCommand
from .convert import ConvertCommand
from .inspect_command import InspectCommand

__all__ = [
    'BaseCommand',
    'ConvertCommand',
    'InspectCommand',
]
