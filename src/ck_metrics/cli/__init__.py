"""Command-line interface for ck-metrics."""
