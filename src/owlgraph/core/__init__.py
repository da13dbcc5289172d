"""Conversion services."""

from .pipeline import ConversionResult, convert_content, convert_file, convert_graph

__all__ = [
    'ConversionResult',
    'convert_content',
    'convert_file',
    'convert_graph',
]
