"""
Thing provider.

Properties without a declared domain or range still need two endpoints in
the output graph. The provider attaches such properties to a synthesized
``owl:Thing`` node (or ``rdfs:Literal`` for datatype ranges) so that every
edge can be drawn.
"""

import logging
from typing import Optional

from rdflib import OWL, RDFS

from ...constants import IRIConfig
from ...registry import EntityRegistry
from ...shared.models import AbstractProperty, VowlClass, VowlDatatype, VowlDatatypeProperty

logger = logging.getLogger(__name__)


class ThingProvider:
    """
    Fill in missing property endpoints.

    The Thing node gets an IRI from :meth:`EntityRegistry.get_new_iri`; it
    is created lazily and shared by every property that needs it.
    """

    def __init__(self, registry: EntityRegistry) -> None:
        self.registry = registry
        self._thing: Optional[VowlClass] = None

    def get_thing(self) -> VowlClass:
        """Return the shared Thing node, registering it on first use."""
        if self._thing is None:
            self._thing = VowlClass(
                iri=self.registry.get_new_iri(),
                labels={IRIConfig.UNDEFINED_LANGUAGE: "Thing"},
                class_type=OWL.Thing,
            )
            self.registry.add_class(self._thing)
            logger.debug(f"Synthesized owl:Thing as {self._thing.iri}")
        return self._thing

    def get_literal(self) -> VowlDatatype:
        """Return the ``rdfs:Literal`` datatype, registering it if absent."""
        datatypes = self.registry.get_datatype_map()
        if RDFS.Literal in datatypes:
            return datatypes[RDFS.Literal]
        literal = VowlDatatype(
            iri=RDFS.Literal,
            labels={IRIConfig.UNDEFINED_LANGUAGE: "Literal"},
        )
        self.registry.add_datatype(literal)
        return literal

    def add_missing_endpoints(self) -> int:
        """
        Attach a default domain or range to every incomplete property.

        Returns:
            Number of properties that were completed
        """
        completed = 0
        for prop in sorted(self.registry.get_properties(), key=lambda p: str(p.iri)):
            if self._complete(prop):
                completed += 1

        if completed:
            logger.info(f"Attached default endpoints to {completed} properties")
        return completed

    def _complete(self, prop: AbstractProperty) -> bool:
        changed = False
        if not prop.domains:
            prop.domains.append(self.get_thing().iri)
            changed = True
        if not prop.ranges:
            if isinstance(prop, VowlDatatypeProperty):
                prop.ranges.append(self.get_literal().iri)
            else:
                prop.ranges.append(self.get_thing().iri)
            changed = True
        return changed
