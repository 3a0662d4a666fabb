"""
FastAPI Production Server

Run the Performance Coach API without reload, bound to all interfaces.

Usage:
    python scripts/run-prod.py
    PORT=9000 WEB_CONCURRENCY=4 python scripts/run-prod.py
"""

import sys
import os
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
os.chdir(project_root)

import uvicorn
from loguru import logger


def main():
    """Start the FastAPI production server"""
    port = int(os.getenv("PORT", "8000"))
    workers = int(os.getenv("WEB_CONCURRENCY", "2"))

    logger.info("=" * 80)
    logger.info(f"Performance Coach - API Server (Production) | port={port} workers={workers}")
    logger.info("=" * 80)

    uvicorn.run(
        "coach.api.app:app",
        host="0.0.0.0",
        port=port,
        workers=workers,
        reload=False,
        log_level="info",
        access_log=False,
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
