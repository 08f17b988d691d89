"""Domo CLI - Command line interface for the Domo public API."""
