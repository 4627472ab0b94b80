"""API routers for the REST API."""

from fences.web.routers.calculate import router as calculate_router
from fences.web.routers.catalogue import router as catalogue_router
from fences.web.routers.validate import router as validate_router

__all__ = ["calculate_router", "catalogue_router", "validate_router"]
