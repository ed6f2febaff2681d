import uvicorn

from core.config import settings
from core.logging import get_module_logger
from server import server

server_app = server.handler
logger = get_module_logger()


def main():
    """Serve the Stores API (uvicorn main:server_app is equivalent)."""
    host, _, port = settings.server.BACKEND_URL.rsplit("/", 1)[-1].partition(":")
    logger.info("application_starting", host=host, port=port or "8000")
    uvicorn.run(server_app, host=host, port=int(port or 8000))


if __name__ == "__main__":
    main()
