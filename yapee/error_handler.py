"""Error handling helpers for the API service."""
from datetime import datetime, timezone
from typing import Any, Dict
import logging
import traceback

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal server error"}


class ErrorHandler:
    def __init__(self, production: bool = False):
        self.production = production

    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        context = context or {}
        logger.error(
            "Unhandled error: %s (method=%s url=%s)",
            exc,
            context.get("method"),
            context.get("url"),
            exc_info=exc,
        )
        # Error details never leave the service in production.
        if self.production:
            return dict(INTERNAL_ERROR_BODY)
        return {
            "error": str(exc) or type(exc).__name__,
            "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            "url": context.get("url"),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @staticmethod
    def not_found(method: str, path: str) -> Dict[str, Any]:
        logger.warning("404 - Route not found: %s %s", method, path)
        return {"error": "Route not found", "path": path, "method": method}
