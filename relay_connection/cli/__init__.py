"""Command line interface for relay-connection."""
