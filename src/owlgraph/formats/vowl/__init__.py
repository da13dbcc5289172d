"""
VOWL output: endpoint completion and JSON serialization.
"""

from .serializer import VowlSerializer, write_document
from .thing_provider import ThingProvider

__all__ = [
    'VowlSerializer',
    'ThingProvider',
    'write_document',
]
