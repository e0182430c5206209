"""Browser-facing pages: form, result and error rendering plus their routes."""

from unitconv.web.rendering import PageRenderer
from unitconv.web.routes import build_routes

__all__ = ["PageRenderer", "build_routes"]
