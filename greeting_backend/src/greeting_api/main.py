import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

# Fixed response body for the root path, newline included.
GREETING = "Hello from Go API!\n"

DEFAULT_PORT = 3001

# Listener settings: every interface, port 3001.
HOST = "0.0.0.0"
PORT = DEFAULT_PORT
LOG_LEVEL = "info"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Log once when the application starts serving.

    Requests are not logged individually; this is the only line the app itself emits.
    """
    logger.info("Greeting served on path '/' for any method")
    yield


app = FastAPI(
    title="Greeting API",
    description="A single-route API that answers the root path with a fixed greeting.",
    version="1.0.0",
    # Only "/" is routed; the docs and schema endpoints would add more paths.
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    lifespan=lifespan,
)


# PUBLIC_INTERFACE
def greet(request: Request) -> PlainTextResponse:
    """
    Root handler.

    Method, headers, query string and body are all ignored.

    Returns:
        The greeting line, served as text/plain with status 200.
    """
    return PlainTextResponse(GREETING)


# No method filter: every verb, including extension methods, reaches greet.
app.add_route("/", greet, include_in_schema=False)


# PUBLIC_INTERFACE
def startup_banner(port: int = DEFAULT_PORT) -> str:
    """Build the line printed to stdout before the server starts listening."""
    return f"🚀 API Server running on http://localhost:{port}"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send application log records to stderr next to uvicorn's own."""
    logging.basicConfig(
        level=level.upper(),
        format="%(levelname)s:     %(name)s - %(message)s",
    )


# PUBLIC_INTERFACE
def main() -> None:
    """
    Print the startup banner and serve the app until the process is killed.

    A failed bind (port in use, permission denied) is logged by uvicorn to stderr and
    ends the process with a non-zero exit status. It is not retried.
    """
    # Consoles that cannot encode the emoji get a replacement character instead of a crash.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="replace")
    print(startup_banner(PORT), flush=True)
    configure_logging(LOG_LEVEL)
    # access_log off: no per-request log lines.
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL, access_log=False)


if __name__ == "__main__":
    main()
