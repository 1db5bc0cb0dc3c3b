"""Static Prometheus metrics exporter."""

__version__ = "0.1.0"
