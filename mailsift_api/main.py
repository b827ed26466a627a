# mailsift_api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mailsift import EngineError, ENGINE_FAULT, get_engine
from mailsift.config import settings, split_csv_setting
from .routers import uploads, validate

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("mailsift.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_engine()
    yield


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

# ---------------------------------------------------
# CORS
# ---------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=split_csv_setting(settings.CORS_ORIGINS) or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------
# Engine errors -> JSON
# ---------------------------------------------------
@app.exception_handler(EngineError)
async def engine_error_handler(request: Request, exc: EngineError):
    status = 500 if exc.error_type == ENGINE_FAULT else 400
    if status == 500:
        # the engine already logged the fault at ERROR
        logger.debug("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status, content=exc.to_dict())


# ---------------------------------------------------
# Health check
# ---------------------------------------------------
@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}


# ---------------------------------------------------
# Routers
# ---------------------------------------------------
app.include_router(validate.router, prefix="/validate", tags=["validate"])
app.include_router(uploads.router, prefix="/uploads", tags=["uploads"])
