import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from src.config import settings
from src.error_handlers import (
    generic_exception_handler,
    receipt_format_exception_handler,
    receipt_validation_exception_handler,
)
from src.model.ReceiptModel import ReceiptFormatError
from src.model.ReceiptPayloadModel import decode_receipt
from src.receipts.points import calculate_points
from src.receipts.validator import ReceiptValidationError, validate_receipt
from src.storage.memory import InMemoryReceiptStore

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "Invalid URL format. Use /receipts/{id}/points."


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = InMemoryReceiptStore()
    logger.info("Receipt processor listening on %s:%s", settings.HOST, settings.PORT)
    yield
    logger.info("Shutting down with %d receipts in memory", len(app.state.store))


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_exception_handler(ReceiptFormatError, receipt_format_exception_handler)
app.add_exception_handler(ReceiptValidationError, receipt_validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


def get_store(request: Request) -> InMemoryReceiptStore:
    return request.app.state.store


@app.post("/receipts/process")
async def process_receipt(request: Request, store: InMemoryReceiptStore = Depends(get_store)):
    receipt = decode_receipt(await request.body())
    valid, errors = validate_receipt(receipt)
    if not valid:
        raise ReceiptValidationError(errors)

    receipt_id = str(uuid.uuid4())
    logger.info("Generated receipt ID: %s", receipt_id)
    points = calculate_points(receipt)
    logger.info("Calculated points for receipt ID %s: %d", receipt_id, points)
    store.save(receipt_id, receipt, points)
    logger.info("Saved receipt with ID %s to storage", receipt_id)

    return {"id": receipt_id}


@app.get("/receipts/{receipt_id}/points")
def get_points(receipt_id: str, store: InMemoryReceiptStore = Depends(get_store)):
    logger.info("Fetching points for receipt ID: %s", receipt_id)
    points, found = store.get_points(receipt_id)
    if not found:
        logger.info("Receipt with ID %s not found.", receipt_id)
        return PlainTextResponse("Receipt not found.", status_code=HTTP_404_NOT_FOUND)
    return {"points": points}


@app.get("/health")
def health(store: InMemoryReceiptStore = Depends(get_store)):
    return {"status": "ok", "receipts": len(store)}


# Registered last so it only sees paths no other route matched.
@app.get("/{path:path}")
def invalid_url(path: str):
    logger.info("Invalid URL format: /%s", path)
    return PlainTextResponse(INVALID_URL_MESSAGE, status_code=HTTP_400_BAD_REQUEST)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )
