"""Command line interface for pms."""
