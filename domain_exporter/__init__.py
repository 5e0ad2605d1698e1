"""Domain Expiry Exporter - Prometheus exporter for domain expiration dates."""

__version__ = "1.0.0"
