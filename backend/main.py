"""
Cinematic Mirror - Main Application Entry Point
"""

from cinematic_mirror.core.config import get_settings
from cinematic_mirror.main import app, create_app

__all__ = ["app", "create_app"]


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
