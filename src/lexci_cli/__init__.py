"""lexical-ci: test-matrix orchestrator for the lexical workspace."""

__version__ = "0.3.0"
