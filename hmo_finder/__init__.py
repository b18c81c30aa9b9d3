"""hmo-finder: search synthetic HMO investment listings over a small REST API."""

__version__ = "0.1.0"
