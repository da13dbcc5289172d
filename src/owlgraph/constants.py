"""
Centralized configuration constants for the OWL graph converter.

This module provides a single source of truth for configuration constants,
default values, and limits used throughout the application.
"""

from enum import IntEnum
from typing import Final

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Following Unix conventions:
    - 0: Success
    - 1: General error
    - 2: Validation/syntax error
    - 3+: Specific error categories
    """
    SUCCESS = 0
    ERROR = 1
    VALIDATION_ERROR = 2
    CONFIG_ERROR = 3
    REGISTRY_ERROR = 4
    FILE_NOT_FOUND = 5


# ============================================================================
# IRI Generation
# ============================================================================

class IRIConfig:
    """Identifier configuration."""

    SYNTHETIC_IRI_PREFIX: Final[str] = "http://owl2vowl.de#"
    """Namespace for IRIs invented during conversion (never used by source ontologies)."""

    FIRST_OUTPUT_ID: Final[int] = 0
    """First output identifier handed out by the allocator."""

    UNDEFINED_LANGUAGE: Final[str] = "undefined"
    """Label key used for literals without a language tag."""


# ============================================================================
# Registry
# ============================================================================

class RegistryDefaults:
    """Entity registry defaults."""

    DUPLICATE_POLICY: Final[str] = "overwrite"
    """Policy for re-inserting an IRI into the same typed table."""

    SUPPORTED_DUPLICATE_POLICIES: Final[tuple[str, ...]] = ("overwrite", "warn", "reject")
    """Accepted values for the ``duplicate_policy`` config key."""


# ============================================================================
# Processing Limits
# ============================================================================

class ProcessingLimits:
    """Processing thresholds."""

    PROGRESS_BAR_MIN_ITEMS: Final[int] = 10
    """Loops over fewer items than this run without a progress bar."""

    LARGE_GRAPH_TRIPLES: Final[int] = 100000
    """Graphs above this triple count trigger a slow-processing warning."""


# ============================================================================
# File Extensions
# ============================================================================

class FileExtensions:
    """Supported file extensions and their rdflib parser names."""

    RDF_FORMATS: Final[dict] = {
        '.ttl': 'turtle',
        '.turtle': 'turtle',
        '.n3': 'n3',
        '.nt': 'nt',
        '.owl': 'xml',
        '.rdf': 'xml',
        '.xml': 'xml',
        '.jsonld': 'json-ld',
    }
    """Input extension to rdflib format name."""



# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Human-readable formatter style."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("text", "json")
    """Supported formatter styles."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""

    ROTATION_ENABLED: Final[bool] = True
    """Enable log rotation by default when a file handler is configured."""
