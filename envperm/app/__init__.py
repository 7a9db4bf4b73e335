"""Command line interface for envperm."""
