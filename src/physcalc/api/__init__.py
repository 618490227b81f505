"""HTTP API for physcalc."""
