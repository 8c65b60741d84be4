"""
Special function for running the API server locally whenever required.

Run `python run_server_local.py` in the terminal to launch the server and
host the Swagger UI at `http://0.0.0.0:8001/docs`.
"""
import signal
import sys

import uvicorn

from resume_engine.logging import ENV, logger_factory

logger = logger_factory.get_logger(__name__)


def main():
    # Use Uvicorn programmatically for proper cleanup on Ctrl+C
    config = uvicorn.Config(
        "api.server:app",
        host="0.0.0.0",
        port=8001,
        reload=ENV in ("development", "local"),
    )
    server = uvicorn.Server(config)

    def handle_exit(sig, frame):
        logger.info("Shutting down gracefully...")
        # This triggers Uvicorn's graceful shutdown
        server.should_exit = True

    # Register signal handlers for graceful exit
    signal.signal(signal.SIGINT, handle_exit)
    signal.signal(signal.SIGTERM, handle_exit)

    logger.info(f"Starting Resume Engine API (ENV={ENV})")
    server.run()
    logger.info("Server stopped cleanly.")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received. Exiting...")
        sys.exit(0)
