"""Custom exception hierarchy for hmo-finder."""


class HmoFinderError(Exception):
    """Base exception for all hmo-finder errors."""


class PropertyNotFoundError(HmoFinderError):
    """Raised when a property id is not present in the store."""

    def __init__(self, property_id: str) -> None:
        super().__init__(f"Property {property_id} not found")
        self.property_id = property_id


class ValidationError(HmoFinderError):
    """Raised when a filter or property input is malformed."""


class GeneratorError(HmoFinderError):
    """Raised when a record generator fails or yields nothing usable."""


class ConfigurationError(HmoFinderError):
    """Raised when configuration is invalid or missing."""
