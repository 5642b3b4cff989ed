"""Command implementations for the msaio CLI."""
