import logging

from fastapi import FastAPI, Request

from apps.backend.utils.envelope import error

log = logging.getLogger("rewards.errors")


class RewardsError(Exception):
    code = "error"

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ResourceNotFoundError(RewardsError):
    """Raised when a requested resource does not exist."""
    code = "not_found"

    def __init__(self, message: str):
        super().__init__(message, 404)


def install_error_handlers(app: FastAPI) -> None:
    """
    Stable error envelopes. Domain errors keep their status and message;
    anything else becomes a generic 500 with no stack text.
    """

    @app.exception_handler(RewardsError)
    async def _rewards_error(request: Request, exc: RewardsError):
        log.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return error(exc.message, code=exc.code, status=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error("Internal server error", code="internal_error", status=500)
