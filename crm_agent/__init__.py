"""CRM agent integration API."""

__version__ = "1.0.0"
