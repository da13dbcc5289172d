"""Registry settings loaded from the ``registry`` section of the config file."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..constants import IRIConfig, RegistryDefaults
from .tables import DuplicatePolicy


@dataclass
class RegistryConfig:
    """
    Settings for one :class:`EntityRegistry`.

    Attributes:
        duplicate_policy: How typed tables treat a re-inserted IRI.
        iri_prefix: Namespace for synthetic IRIs.
    """
    duplicate_policy: DuplicatePolicy = DuplicatePolicy(RegistryDefaults.DUPLICATE_POLICY)
    iri_prefix: str = IRIConfig.SYNTHETIC_IRI_PREFIX

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RegistryConfig":
        """
        Build settings from a config dictionary.

        Raises:
            ValueError: If ``duplicate_policy`` or ``iri_prefix`` is invalid.
        """
        data = dict(data or {})

        policy_value = str(data.get('duplicate_policy', RegistryDefaults.DUPLICATE_POLICY)).lower()
        if policy_value not in RegistryDefaults.SUPPORTED_DUPLICATE_POLICIES:
            raise ValueError(
                f"Unsupported duplicate_policy '{policy_value}'. "
                f"Expected one of: {', '.join(RegistryDefaults.SUPPORTED_DUPLICATE_POLICIES)}"
            )

        iri_prefix = data.get('iri_prefix', IRIConfig.SYNTHETIC_IRI_PREFIX)
        if not isinstance(iri_prefix, str) or not iri_prefix:
            raise ValueError("iri_prefix must be a non-empty string")

        return cls(duplicate_policy=DuplicatePolicy(policy_value), iri_prefix=iri_prefix)
