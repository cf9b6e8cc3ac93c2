#!/usr/bin/env python3
"""
Deployment API server.

An HTTP facade over docker, git, the reverse proxy admin API and the
deploy/cleanup scripts.

Usage:
    python server.py

Configuration is read from the environment (or a .env file), see
app/config.py.
"""

import logging

import uvicorn

from app.config import Settings
from app.main import create_app


def main() -> None:
    settings = Settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)

    print(f"🚀 Deployment API running on http://{settings.HOST}:{settings.PORT}")
    print(f"📁 Scripts directory: {settings.SCRIPTS_DIR}")
    print("📡 Endpoints:")
    print("   GET    /health")
    print("   GET    /deployments")
    print("   GET    /branches")
    print("   GET    /routes")
    print("   POST   /deploy")
    print("   DELETE /cleanup/{branch}")

    # In-flight requests are not drained on SIGTERM/SIGINT.
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_graceful_shutdown=0,
    )


if __name__ == "__main__":
    main()
