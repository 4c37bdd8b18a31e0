"""FastAPI-based webhook receiver for LINE platform callbacks."""

from __future__ import annotations

import asyncio
import threading

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from ..core.config import WebhookServerConfig
from ..core.exceptions import InvalidSignatureError, WebhookParseError
from ..core.logger import get_logger
from .handler import WebhookHandler
from .signature import SIGNATURE_HEADER

logger = get_logger("webhook.server")


def create_webhook_app(handler: WebhookHandler, path: str = "/callback") -> FastAPI:
    """Build a FastAPI app that feeds POSTed webhook bodies to ``handler``.

    Responses:
    - 200 ``OK`` when every event was dispatched
    - 400 when the signature is invalid or the body is malformed
    - 500 when a callback raised
    """
    app = FastAPI()

    @app.get("/healthz")
    async def health() -> dict[str, str]:  # pragma: no cover - trivial
        return {"status": "ok"}

    @app.post(path, response_class=PlainTextResponse)
    async def callback(request: Request) -> str:
        body = await request.body()
        signature = request.headers.get(SIGNATURE_HEADER)

        try:
            # Callbacks may block on API calls, keep them off the event loop
            await run_in_threadpool(handler.handle, body, signature)
        except InvalidSignatureError as exc:
            raise HTTPException(status_code=400, detail="Invalid signature") from exc
        except WebhookParseError as exc:
            logger.warning("Rejected malformed webhook body: %s", exc)
            raise HTTPException(status_code=400, detail="Malformed webhook body") from exc
        except Exception as exc:
            logger.error("Webhook callback failure: %s", exc, exc_info=True)
            raise HTTPException(status_code=500, detail="Handler failure") from exc

        return "OK"

    return app


class WebhookServer:
    """Serve a WebhookHandler over HTTP in a background thread."""

    def __init__(self, config: WebhookServerConfig, handler: WebhookHandler) -> None:
        self._config = config
        self._handler = handler
        self._app = create_webhook_app(handler, config.path)
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def app(self) -> FastAPI:
        return self._app

    def start(self) -> None:
        if self._thread:
            return

        config = uvicorn.Config(
            self._app,
            host=self._config.host,
            port=self._config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(config)

        def _run() -> None:
            loop = asyncio.new_event_loop()
            asyncio.set_event_loop(loop)
            try:
                server = self._server
                if server is None:
                    logger.error("Webhook server thread started without a uvicorn server instance")
                    return
                loop.run_until_complete(server.serve())
            finally:
                loop.close()

        self._thread = threading.Thread(
            target=_run,
            name="line-webhook-server",
            daemon=True,
        )
        self._thread.start()
        logger.info(
            "LINE webhook server listening on http://%s:%s%s",
            self._config.host,
            self._config.port,
            self._config.path,
        )

    def serve_forever(self) -> None:
        """Run the server in the calling thread until interrupted."""
        uvicorn.run(self._app, host=self._config.host, port=self._config.port, log_level="info")

    def stop(self) -> None:
        if self._server:
            self._server.should_exit = True
        if self._thread:
            self._thread.join(timeout=5)
            self._thread = None
        logger.info("LINE webhook server stopped")

    @property
    def is_running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())
