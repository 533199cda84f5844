"""HTTP middleware binding request context for logging and tracing."""

from fastapi import FastAPI, Request

from infrastructure.logging import bind_request_context

REQUEST_ID_HEADER = "X-Request-ID"


def install_request_context_middleware(app: FastAPI) -> None:
    """Bind a correlation ID to every request.

    The ID is taken from the ``X-Request-ID`` header or generated, stored on
    ``request.state.trace_id`` for response envelopes, and echoed back in
    the ``X-Request-ID`` response header.
    """

    @app.middleware("http")
    async def _request_context_middleware(request: Request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(REQUEST_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            request.state.trace_id = correlation_id
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = correlation_id
            return response
