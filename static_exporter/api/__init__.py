"""HTTP API for the exporter."""
