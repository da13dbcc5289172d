"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Parser-to-serializer tests

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import json
import os
import sys

import pytest
from rdflib import URIRef

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

# Import centralized fixtures
from fixtures import (
    # TTL fixtures
    SIMPLE_TTL,
    MINIMAL_TTL,
    INHERITANCE_TTL,
    INDIVIDUALS_TTL,
    MISSING_DOMAIN_TTL,
    UNDECLARED_RANGE_TTL,
    SHARED_XSD_RANGE_TTL,
    PUNNING_TTL,

    # Config fixtures
    SAMPLE_CONFIG,
)


EX = "http://example.org/"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Parser-to-serializer tests")


# =============================================================================
# TTL/RDF Fixtures
# =============================================================================

@pytest.fixture
def simple_ttl():
    """Person, Organization, two datatype properties and one object property."""
    return SIMPLE_TTL


@pytest.fixture
def minimal_ttl():
    """A single class."""
    return MINIMAL_TTL


@pytest.fixture
def inheritance_ttl():
    """Class inheritance (Animal -> Mammal -> Dog) with an undeclared parent."""
    return INHERITANCE_TTL


@pytest.fixture
def individuals_ttl():
    """A punned class and a named individual."""
    return INDIVIDUALS_TTL


@pytest.fixture
def missing_domain_ttl():
    """Properties without domain or range."""
    return MISSING_DOMAIN_TTL


@pytest.fixture
def undeclared_range_ttl():
    """Object property whose range is never declared."""
    return UNDECLARED_RANGE_TTL


@pytest.fixture
def shared_xsd_range_ttl():
    """An XSD datatype used as range by an object and a datatype property."""
    return SHARED_XSD_RANGE_TTL


@pytest.fixture
def punning_ttl():
    """An IRI declared as both a class and an object property."""
    return PUNNING_TTL


@pytest.fixture
def temp_ttl_file(tmp_path, simple_ttl):
    """Create a temporary TTL file for testing."""
    ttl_file = tmp_path / "test_ontology.ttl"
    ttl_file.write_text(simple_ttl, encoding="utf-8")
    return str(ttl_file)


# =============================================================================
# Registry Fixtures
# =============================================================================

@pytest.fixture
def iri():
    """Build an example.org IRI from a local name."""
    def _iri(local_name: str) -> URIRef:
        return URIRef(EX + local_name)
    return _iri


@pytest.fixture
def registry():
    """A fresh registry with default settings."""
    from owlgraph.registry import EntityRegistry
    return EntityRegistry()


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return json.loads(json.dumps(SAMPLE_CONFIG))


@pytest.fixture
def temp_config_file(tmp_path, sample_config):
    """Create a temporary configuration file for testing."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(sample_config, indent=2))
    return str(config_file)
