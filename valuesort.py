#!/usr/bin/env python3
"""
VALUESORT - Card-Sorting Exercise for Core Values
=================================================

FastAPI + HTMX implementation

Usage:
    python valuesort.py                  # Launch server on port 7860
    python valuesort.py --port 7861      # Custom port
    python valuesort.py --config my.json # Load a ValuesortConfig
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure the package is importable
sys.path.insert(0, str(Path(__file__).parent))

import uvicorn
from fastapi import FastAPI, Request, Cookie

from config import ValuesortConfig
from ui.render import render_page
from ui.session_manager import session_manager
from ui.routes import exercise_router, history_router, review_router, events_router

# Create FastAPI app
app = FastAPI(title="Valuesort", version="1.0.0")

# Include route modules
app.include_router(exercise_router)
app.include_router(history_router)
app.include_router(review_router)
app.include_router(events_router)


# ========== Main Screen Routes ==========

@app.get("/")
async def root(request: Request, session_id: str = Cookie(None)):
    """Exercise screen - create session if needed."""
    session_manager.cleanup_expired()
    session_id, app_instance, new_session = session_manager.get_or_create_app(session_id)
    return render_page(request, app_instance, session_id, new_session)


@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "ok", "sessions": session_manager.session_count()}


def main():
    parser = argparse.ArgumentParser(
        description="Valuesort: Card-Sorting Exercise for Core Values"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=7860,
        help="Port to run the server on (default: 7860)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--save-dir",
        type=str,
        default=None,
        help="Directory for session data (default: ./valuesort_sessions)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON ValuesortConfig",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload on code changes",
    )
    args = parser.parse_args()

    config = ValuesortConfig.load(args.config) if args.config else ValuesortConfig()
    if args.save_dir:
        config.save_dir = args.save_dir

    # Update session manager configuration
    session_manager.configure(config)
    Path(config.save_dir).mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("VALUESORT - Card-Sorting Exercise for Core Values (HTMX)")
    print("=" * 60)
    print()
    print(f"Sessions directory: {config.save_dir}")
    print(f"Value set: {config.default_value_set} | Core limit: {config.core_limit}")
    print(f"Server: http://{args.host}:{args.port}")
    print()

    # Reload needs an import string; it re-imports with default config
    uvicorn.run(
        "valuesort:app" if args.reload else app,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
