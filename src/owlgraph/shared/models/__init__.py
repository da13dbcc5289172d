"""
Shared data models for the OWL graph converter.

This module contains the entity classes extracted from an ontology and
indexed by the entity registry.

Usage:
    from owlgraph.shared.models import VowlClass, VowlObjectProperty
"""

from .entities import (
    AbstractEntity,
    AbstractNode,
    AbstractProperty,
    VowlClass,
    VowlDatatype,
    VowlObjectProperty,
    VowlDatatypeProperty,
    TypeOfProperty,
    VowlIndividual,
)

__all__ = [
    # Capabilities
    "AbstractEntity",
    "AbstractNode",
    "AbstractProperty",
    # Nodes
    "VowlClass",
    "VowlDatatype",
    # Properties
    "VowlObjectProperty",
    "VowlDatatypeProperty",
    "TypeOfProperty",
    # Individuals
    "VowlIndividual",
]
