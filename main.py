"""
Kids Learning AI - Main FastAPI Application

A thin relay between a children's learning app and the Groq completion API:
- Short stories and daily-routine narratives for a given age
- Multiple-choice quizzes generated from a story
- Translation with simple words for kids
- Arithmetic practice problems
"""
import sys
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.openapi.utils import get_openapi
from loguru import logger
import uvicorn

from app.core.config import settings
from app.api import router as api_router
from app.models.responses import HealthResponse


# Configure logging
logger.remove()  # Remove default handler
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level=settings.log_level
)

BANNER = "🚀 Groq backend running! Use /story, /quiz, /translate, /math, /words."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager

    Logs configuration on startup; the completion service is created
    lazily on the first request.
    """
    # Startup
    logger.info("🚀 Starting Kids Learning AI...")
    logger.info(f"🔧 Configuration: {settings.app_name} v{settings.app_version}")
    logger.info(f"🔧 Environment: Debug={settings.debug}")
    logger.info(f"🔧 Model: {settings.groq_model} (temperature={settings.temperature})")

    try:
        from app.utils.dependencies import get_completion_service
        completion_service = get_completion_service()
        logger.info(f"✅ {completion_service.get_service_name()} completion service ready")
    except Exception as e:
        logger.error(f"❌ Service initialization failed: {e}")

    yield

    # Shutdown
    logger.info("🛑 Shutting down Kids Learning AI...")


# Create FastAPI application
app = FastAPI(
    title="Kids Learning AI",
    description="""
## 🧒 Kids Learning AI

Generates learning content for children with a Groq-hosted language model.

### 🌟 Endpoints

- **📖 /story**: short fun story for an age and topic
- **❓ /quiz**: 10 multiple-choice questions about a story
- **🌍 /translate**: translation with simple words
- **✍️ /words**: a child's daily routine in their own words
- **🧮 /math**: 5 arithmetic problems for an age and operation

### 📖 Usage Example

```bash
curl -X POST "/math" \\
  -H "Content-Type: application/json" \\
  -d '{"age": 7, "operation": "addition"}'
```
    """,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# Custom OpenAPI schema with enhanced documentation
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title="Kids Learning AI API",
        version=settings.app_version,
        description="Learning content generation for children",
        routes=app.routes,
    )

    openapi_schema["servers"] = [
        {"url": "/", "description": "Current server"},
        {"url": f"http://localhost:{settings.port}", "description": "Local development"},
    ]

    openapi_schema["tags"] = [
        {
            "name": "Learning",
            "description": "Stories, quizzes, translations and practice problems generated by the model."
        }
    ]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


# Include API routers
app.include_router(api_router)


# Root endpoint
@app.get("/", tags=["Root"], response_class=PlainTextResponse)
async def root():
    """
    Root endpoint listing the available routes
    """
    return BANNER


# Health check endpoint
@app.get("/health", tags=["Health"], response_model=HealthResponse)
async def health_check():
    """
    Service health check

    Reports local service state only; the completion API is not called.
    """
    try:
        from app.utils.dependencies import check_services_health
        health_status = await check_services_health()

        return HealthResponse(
            status="healthy",
            timestamp=time.time(),
            version=settings.app_version,
            services=health_status
        )
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "error": str(e),
                "version": settings.app_version
            }
        )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled errors
    """
    logger.error(f"Unhandled exception for {request.url}: {exc}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": str(exc) if settings.debug else "Internal server error"
        }
    )


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log all HTTP requests for monitoring and debugging
    """
    start_time = time.time()

    logger.info(f"📥 {request.method} {request.url}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(f"📤 {request.method} {request.url} - {response.status_code} - {process_time:.2f}s")

    return response


# Run the application
if __name__ == "__main__":
    logger.info(f"🚀 Starting Kids Learning AI on {settings.host}:{settings.port}")

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        access_log=True,
        log_level=settings.log_level.lower()
    )
