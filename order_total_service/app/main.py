import logging
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings, load_settings
from .decoder import decode_order
from .logging_config import setup_logging
from .models import Order
from .rates import RateLookupClient
from .responses import build_response, error_response
from .tax import calculate_total

logger = logging.getLogger(__name__)

INSTRUCTIONS = "Try POSTing data to /compute such as: `curl localhost:8002/compute -XPOST -d '...'`"


def get_rate_client(settings: Settings = Depends(get_settings)) -> RateLookupClient:
    """FastAPI dependency to get a rate client for a single request."""
    return RateLookupClient(settings.rate_service_url, settings.rate_timeout)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit, already-resolved Settings."""
    app = FastAPI(title="Order Total Service", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings or load_settings()

    # Unknown paths and wrong methods both answer a bare 404; other statuses keep their code.
    @app.exception_handler(StarletteHTTPException)
    async def bare_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return Response(status_code=404)
        return Response(status_code=exc.status_code)

    # CORS preflight for the compute endpoint.
    @app.options("/compute")
    async def compute_preflight():
        return build_response("")

    @app.get("/", response_class=PlainTextResponse)
    async def instructions():
        """Usage hint for anyone hitting the root."""
        return INSTRUCTIONS

    @app.post("/compute")
    async def compute(request: Request, client: RateLookupClient = Depends(get_rate_client)):
        """
        Decode the order, look up the zip code's tax rate and return the
        order with its total.
        - Bad bodies and missing rates answer 200 with an error envelope.
        - Anything unexpected answers 500 with an error envelope.
        """
        body = await request.body()
        try:
            decoded = decode_order(body)
            if not isinstance(decoded, Order):
                return error_response(decoded.message)
            # The rate lookup blocks on network I/O.
            return await run_in_threadpool(calculate_total, decoded, client)
        except Exception:
            logger.exception("Unexpected failure while computing order total")
            return error_response("Internal server error", status_code=500)

    return app


def run() -> None:
    """Console entry point: serve the app on the configured address."""
    settings = load_settings()
    setup_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Server started on port %s (rate service: %s)", settings.port, settings.rate_service_url)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
