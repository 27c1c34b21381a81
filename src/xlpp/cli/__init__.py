"""Command line JSON <-> XLPP translator."""
