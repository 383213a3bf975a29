"""Command-line interface for the address book."""
