"""Command line interface for listing named colors."""
