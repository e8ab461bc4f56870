"""
FastAPI dependency injection utilities

This module provides dependency injection for all services,
ensuring singleton instances and proper initialization.
"""
import functools
from functools import lru_cache
from typing import Dict, Any, Optional
from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.core.config import settings
from app.core.interfaces.completion_service import CompletionService
from app.services.ai.groq_service import GroqCompletionService
from app.services.ai.learning_service import LearningContentService


@lru_cache()
def get_completion_service() -> CompletionService:
    """Get singleton Groq completion service"""
    return GroqCompletionService(settings)


@lru_cache()
def get_learning_service() -> LearningContentService:
    """Get singleton learning content service"""
    return LearningContentService(
        completion_service=get_completion_service(),
        settings=settings
    )


# ============================================================================
# SERVICE HEALTH CHECKS
# ============================================================================

async def check_services_health() -> Dict[str, Dict[str, Any]]:
    """
    Check health of all services

    Only local state is inspected; the completion service is not called.

    Returns:
        Dictionary with health status of all services
    """
    health_status = {}

    try:
        completion_service = get_completion_service()
        stats = await completion_service.get_statistics()
        health_status["completion_service"] = {
            "status": "healthy" if completion_service.is_available() else "unconfigured",
            **stats
        }
    except Exception as e:
        health_status["completion_service"] = {
            "status": "unhealthy",
            "error": str(e)
        }

    return health_status


# ============================================================================
# ERROR HANDLING DECORATORS
# ============================================================================

def handle_service_errors(fallback_message: Optional[str] = None):
    """
    Decorator to turn service errors into HTTP 500 error payloads

    Args:
        fallback_message: Fixed message to return instead of the
            exception text

    The response body is always {"error": message}.
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTP exceptions as-is
                raise
            except Exception as e:
                logger.error(f"❌ Error in {func.__name__}: {e!r}")
                message = fallback_message or str(e) or e.__class__.__name__
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={"error": message}
                )

        return wrapper

    return decorator


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def clear_service_cache():
    """
    Clear all cached service instances

    Useful for testing or configuration reloading
    """
    get_completion_service.cache_clear()
    get_learning_service.cache_clear()
