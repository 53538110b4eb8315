#!/usr/bin/env python3
"""
Course Recommendation API server: entrypoint for uvicorn recserver.server:app.

Run directly: python -m recserver.server
"""

from .app import app

if __name__ == "__main__":
    import uvicorn

    from .config import get_config

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
