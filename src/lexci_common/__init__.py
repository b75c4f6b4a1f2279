"""Shared helpers used by the lexical-ci packages."""
