"""Serve the Donor Registry API: python -m src.app"""
import uvicorn

from src.app.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.app.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    main()
