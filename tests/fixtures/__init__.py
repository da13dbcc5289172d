"""
Centralized test fixtures for the OWL graph converter test suite.

Usage:
    from fixtures import SIMPLE_TTL, SAMPLE_CONFIG

Or use the pytest fixtures in conftest.py which import from here.
"""

from .ttl_fixtures import (
    # Simple TTL content
    SIMPLE_TTL,
    EMPTY_TTL,
    MINIMAL_TTL,

    # Complex TTL content
    INHERITANCE_TTL,
    INDIVIDUALS_TTL,

    # Edge case TTL content
    MISSING_DOMAIN_TTL,
    UNDECLARED_RANGE_TTL,
    SHARED_XSD_RANGE_TTL,
    PUNNING_TTL,
    INVALID_TTL,
)

from .config_fixtures import (
    SAMPLE_CONFIG,
    MINIMAL_CONFIG,
    REJECT_DUPLICATES_CONFIG,
)

__all__ = [
    # TTL fixtures
    "SIMPLE_TTL",
    "EMPTY_TTL",
    "MINIMAL_TTL",
    "INHERITANCE_TTL",
    "INDIVIDUALS_TTL",
    "MISSING_DOMAIN_TTL",
    "UNDECLARED_RANGE_TTL",
    "SHARED_XSD_RANGE_TTL",
    "PUNNING_TTL",
    "INVALID_TTL",

    # Config fixtures
    "SAMPLE_CONFIG",
    "MINIMAL_CONFIG",
    "REJECT_DUPLICATES_CONFIG",
]
