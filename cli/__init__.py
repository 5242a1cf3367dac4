"""Command-line interface for weekyears."""
