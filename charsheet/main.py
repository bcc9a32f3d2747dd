"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from charsheet.auth.firebase_admin import initialize_firebase
from charsheet.config import get_settings
from charsheet.routers.auth import router as auth_router
from charsheet.routers.characters import router as characters_router
from charsheet.utils.logging import configure_logging

settings = get_settings()

# Configure logging (must be called before other modules use loggers)
configure_logging(debug=settings.debug)

initialize_firebase()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
    expose_headers=["Content-Length"],
)

# Include routers
app.include_router(auth_router, prefix="/api/auth")
app.include_router(characters_router, prefix="/api")


@app.get("/")
async def root() -> dict:
    """Return application information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
