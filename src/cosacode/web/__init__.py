"""HTTP API exposing the analysis engine."""
