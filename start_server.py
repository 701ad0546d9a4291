#!/usr/bin/env python3
"""
Startup script for the Todo Backend
This script starts the FastAPI server with proper configuration
"""

import uvicorn

from todo_api.config.settings import Settings


def main():
    # Environment (and .env) is read once here
    settings = Settings.from_env()

    print("Starting Todo Backend Server...")
    print(f"Host: {settings.host}")
    print(f"Port: {settings.port}")
    print(f"Reload: {settings.reload}")
    print("=" * 50)

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
