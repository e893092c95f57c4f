"""Command line tools for rzcobs."""
