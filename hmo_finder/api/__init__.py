"""HTTP API."""

from hmo_finder.api.app import create_app
from hmo_finder.api.services import Services, build_services

__all__ = ["Services", "build_services", "create_app"]
