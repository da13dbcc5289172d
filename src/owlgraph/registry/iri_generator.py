"""Synthetic IRI generation for entities the converter invents."""

from rdflib import URIRef

from ..constants import IRIConfig


class SyntheticIriGenerator:
    """
    Produce fresh IRIs under a private namespace.

    Uniqueness relies on the namespace never overlapping a real ontology;
    generated IRIs are not checked against the registry.
    """

    def __init__(self, prefix: str = IRIConfig.SYNTHETIC_IRI_PREFIX) -> None:
        self.prefix = prefix
        self._generations = 0

    def generate(self) -> URIRef:
        """Return ``prefix + counter`` and advance the counter."""
        iri = URIRef(f"{self.prefix}{self._generations}")
        self._generations += 1
        return iri

    @property
    def generated_count(self) -> int:
        return self._generations
