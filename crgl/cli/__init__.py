"""Command-line interface for crgl."""
