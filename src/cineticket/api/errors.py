"""Translation of domain errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cineticket.services.errors import CinemaTicketError

logger = logging.getLogger(__name__)


async def cinema_ticket_error_handler(request: Request, exc: CinemaTicketError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the CinemaTicketError handler on app."""
    app.add_exception_handler(CinemaTicketError, cinema_ticket_error_handler)
