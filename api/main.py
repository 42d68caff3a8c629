"""Main FastAPI application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import router
from config.settings import settings
from models.database import close_mongo_connection, get_users_collection, init_mongo
from services.store import ExerciseStore, InMemoryExerciseStore, MongoExerciseStore
from utils.exceptions import ExerciseTrackerError
from utils.logger import setup_logger

logger = setup_logger(__name__)


async def open_store() -> ExerciseStore:
    """Open the store selected by ``settings.storage_backend``."""
    backend = settings.storage_backend.lower()
    if backend == "memory":
        logger.info("Using in-memory store")
        return InMemoryExerciseStore()
    if backend == "mongo":
        await init_mongo()  # Connect to MongoDB and create the username index
        return MongoExerciseStore(get_users_collection())
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    # Startup
    logger.info("Starting application...")
    app.state.store = await open_store()
    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await app.state.store.close()
    await close_mongo_connection()
    logger.info("Application shut down")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Exercise tracking REST API",
    lifespan=lifespan
)

logger.info(f"CORS configured with origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ExerciseTrackerError)
async def exercise_tracker_error_handler(request: Request, exc: ExerciseTrackerError):
    """Render application errors as ``{"error": message}``."""
    logger.info(f"{request.method} {request.url.path} failed ({exc.status_code}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Log unexpected errors and hide their details from the client."""
    logger.error(f"{request.method} {request.url.path} error: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Server error"})


# Include API routes
app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Exercise Tracker API",
        "version": settings.app_version,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
