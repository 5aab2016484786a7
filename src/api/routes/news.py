"""
FastAPI Routes для новостей.
"""

from src.api.routes.content import build_content_router
from src.domain.value_objects.content_kind import ContentKind

router = build_content_router(ContentKind.NEWS, "/news")
