"""Command-line interface for deepvalidate."""
