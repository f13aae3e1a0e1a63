"""annoguide: regex-constrained entities decoded from a REST API."""

__version__ = "0.1.0"
