"""Input and output formats handled by the converter."""
