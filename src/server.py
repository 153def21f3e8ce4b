"""Uvicorn runner for the Guest Reviews API.

Usage:
    python src/server.py                 # HOST/PORT from the environment (default 0.0.0.0:5000)
    python src/server.py --port 8080
    python src/server.py --reload        # development auto-reload
"""

import argparse

import uvicorn

from reviews.config import load_settings


def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Guest Reviews API server")
    parser.add_argument("--host", default=settings.host, help="Bind address (default: $HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port (default: $PORT or 5000)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload, log_config=None)


if __name__ == "__main__":
    main()
