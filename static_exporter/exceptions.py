"""Custom exceptions for the exporter."""


class ExporterError(Exception):
    """Base exception for exporter errors."""
    pass


class ExpositionFormatError(ExporterError):
    """Raised when exposition text does not parse as Prometheus text format."""
    pass
