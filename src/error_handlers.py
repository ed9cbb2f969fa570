"""Exception handlers that turn receipt failures into HTTP responses."""

import dataclasses
import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from src.model.ReceiptModel import ReceiptFormatError
from src.model.ValidationResponseModel import ValidationResponse
from src.receipts.validator import ReceiptValidationError

logger = logging.getLogger(__name__)

INVALID_FORMAT_MESSAGE = "Invalid receipt format. Please verify input."


def receipt_format_exception_handler(request: Request, exc: ReceiptFormatError):
    logger.warning("Error decoding receipt payload: %s", exc)
    return PlainTextResponse(INVALID_FORMAT_MESSAGE, status_code=HTTP_400_BAD_REQUEST)


def receipt_validation_exception_handler(request: Request, exc: ReceiptValidationError):
    logger.warning("Receipt validation failed: %s", exc.errors)
    response = ValidationResponse(errors=list(exc.errors))
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content=dataclasses.asdict(response))


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )
