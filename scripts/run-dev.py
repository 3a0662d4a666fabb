"""
FastAPI Development Server

Run the Performance Coach API with auto-reload.

Usage:
    python scripts/run-dev.py
    python scripts/run-dev.py --port 8080
"""

import argparse
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
    """Start the FastAPI development server"""
    parser = argparse.ArgumentParser(description="Performance Coach API (development)")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    base_url = f"http://{args.host}:{args.port}"
    logger.info("=" * 80)
    logger.info("Performance Coach - API Server (Development)")
    logger.info("=" * 80)
    logger.info(f"API Documentation: {base_url}/docs")
    logger.info(f"Health Check:      {base_url}/health")
    logger.info(f"Chat:              POST {base_url}/api/chat")
    logger.info(f"Telemetry:         POST {base_url}/api/telemetry")
    logger.info("Press CTRL+C to stop the server")
    logger.info("=" * 80)

    uvicorn.run(
        "coach.api.app:app",
        host=args.host,
        port=args.port,
        reload=True,
        log_level="debug",
        access_log=True,
        reload_dirs=[str(project_root / "coach")]
    )


if __name__ == "__main__":
    main()
