"""
DataCanvas API

Projects of typed data columns, alias merging for categorical values and
chart suggestions derived from column shape.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import columns, projects
from .core.config import settings
from .core.errors import DataCanvasError, InvalidMergeRequest, NotFoundError
from .middleware import ErrorHandlerMiddleware, RequestLoggerMiddleware

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("datacanvas")

ERROR_STATUS = {
    NotFoundError: 404,
    InvalidMergeRequest: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DEMO_MODE:
        projects.init_demo_project()
        logger.info("Demo mode enabled")
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(ErrorHandlerMiddleware)
app.add_middleware(RequestLoggerMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DataCanvasError)
async def domain_error_handler(request: Request, exc: DataCanvasError):
    status_code = ERROR_STATUS.get(type(exc), 400)
    logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"message": message})


app.include_router(projects.router, prefix=settings.API_PREFIX)
app.include_router(columns.router, prefix=settings.API_PREFIX)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": settings.APP_VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
