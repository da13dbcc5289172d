"""
Registry error types.

Every lookup failure names the offending IRI so the conversion can abort
with a diagnostic pointing at the collaborator that referenced it.
"""

from typing import Optional


class RegistryError(Exception):
    """Base exception for entity registry failures."""

    def __init__(self, message: str, iri: Optional[str] = None):
        self.iri = iri
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class EntityNotFoundError(RegistryError, KeyError):
    """Raised when an IRI is absent from the table being queried."""

    def __init__(self, kind: str, iri: str):
        self.kind = kind
        super().__init__(f"Can't find {kind} for passed iri: {iri}", iri=iri)


class EntityKindMismatchError(RegistryError, TypeError):
    """Raised when an IRI resolves to an entity lacking the requested capability."""

    def __init__(self, expected: str, actual: str, iri: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Entity for iri {iri} is a {actual}, not a {expected}",
            iri=iri,
        )


class DuplicateEntityError(RegistryError):
    """Raised when an IRI is inserted twice under the ``reject`` policy."""

    def __init__(self, kind: str, iri: str):
        self.kind = kind
        super().__init__(f"Duplicate {kind} for iri: {iri}", iri=iri)
