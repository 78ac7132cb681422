"""Command-line interface for jdkregistry."""
