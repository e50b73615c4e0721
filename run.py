import argparse

import uvicorn
from loguru import logger


def main():
    """Run the DevConnector service with uvicorn."""
    parser = argparse.ArgumentParser(description="Run DevConnector Service")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind")
    parser.add_argument("--port", type=int, default=5000, help="Port to bind")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    logger.info(f"Serving DevConnector Service at http://{args.host}:{args.port}")
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
