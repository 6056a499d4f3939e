#!/usr/bin/env python3
"""
sChan Server
Serves the imageboard pages, uploaded images and static assets
"""
import logging
import os
import sys
import uvicorn
from config import DEFAULT_HOST, DEFAULT_PORT, LOG_LEVEL


def setup_logging(log_level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def main():
    # Change to the directory containing this script
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)
    setup_logging()

    print("Starting sChan...")
    print(f"Working directory: {os.getcwd()}")
    print(f"Available at http://localhost:{DEFAULT_PORT}")
    print("Press Ctrl+C to stop the server")

    try:
        # Import here to ensure we're in the right directory
        from app import app

        uvicorn.run(
            app,
            host=DEFAULT_HOST,
            port=DEFAULT_PORT,
            log_level=LOG_LEVEL.lower(),
            access_log=True
        )
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    except Exception as e:
        print(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
