"""FastAPI application serving the mining monitor form.

GET (and any other non-POST method) on "/" renders the empty form; POST runs
the mining check for the submitted address. Every outcome, errors included,
is returned as a 200 HTML page.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse

from netrum_monitor.helpers.config import get_sample_delay
from netrum_monitor.helpers.logging import get_logger
from netrum_monitor.mining.client import MiningClient
from netrum_monitor.mining.monitor import handle_submission
from netrum_monitor.mining.render import render_monitor_page, render_page


logger = get_logger(__name__)

NON_POST_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_mining_client(request: Request) -> MiningClient:
    """Dependency returning the application-wide mining client."""
    return request.app.state.mining_client


def create_app(
    mining_client: MiningClient | None = None,
    *,
    sample_delay: float | None = None,
) -> FastAPI:
    """Build the monitor application.

    Args:
        mining_client: Client to use; when omitted one is created on startup
            and closed on shutdown
        sample_delay: Seconds between claim samples (default: NETRUM_SAMPLE_DELAY)

    Returns:
        FastAPI: Configured application
    """
    delay = sample_delay if sample_delay is not None else get_sample_delay()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned: MiningClient | None = None
        if getattr(app.state, "mining_client", None) is None:
            owned = MiningClient()
            app.state.mining_client = owned
            logger.info("Mining API client ready (%s)", owned.base_url)
        try:
            yield
        finally:
            if owned is not None:
                await owned.aclose()
                app.state.mining_client = None

    app = FastAPI(title="Netrum Mining Monitor", lifespan=lifespan)
    app.state.mining_client = mining_client
    app.state.sample_delay = delay

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.api_route("/", methods=NON_POST_METHODS, response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        return HTMLResponse(content=render_page())

    @app.post("/", response_class=HTMLResponse)
    async def check_mining(
        client: Annotated[MiningClient, Depends(get_mining_client)],
        address: Annotated[str, Form()] = "",
    ) -> HTMLResponse:
        page = await handle_submission(client, address, sample_delay=delay)
        return HTMLResponse(content=render_monitor_page(page))

    return app


__all__ = ["create_app", "get_mining_client"]
