"""
OWL graph converter.

Loads an OWL/RDF ontology into an in-memory entity registry and serializes
it as a WebVOWL-style graph document.
"""

__version__ = "0.1.0"
