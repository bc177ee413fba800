# docjson/main.py
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from docjson.api import routers
from docjson.core.config import get_settings
from docjson.core.errors import DocumentError, UploadError
from docjson.core.logging import configure_logging
from docjson.utils.file_utils import NO_FILE_MESSAGE

# === Settings & logging ===
settings = get_settings()
logger = configure_logging()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
)

# === CORS ===
allow_origins = [origin.strip() for origin in settings.allow_origins if origin.strip()] or ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Error bodies: always {"message": ...} ===
@app.exception_handler(DocumentError)
async def document_error_handler(request: Request, exc: DocumentError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Conversion error on %s: %s", request.url.path, exc.message)
    else:
        logger.info("Rejected upload on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # a "file" field that is not a file part counts as no file at all
    if any(tuple(error.get("loc", ()))[-1:] == ("file",) for error in exc.errors()):
        return await document_error_handler(request, UploadError(NO_FILE_MESSAGE))
    return await request_validation_exception_handler(request, exc)


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# === Routers ===
for router in routers:
    app.include_router(router)


@app.get("/")
async def root() -> dict:
    logger.debug("Root endpoint accessed")
    return {"message": "Document to JSON API. POST a file to /api/convert."}
