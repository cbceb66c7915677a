import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from analytics import router as analytics_router
from core import config, db, schema
from core.errors import OperationFailed
from projects import router as projects_router
from reports import router as reports_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        if config.init_schema_on_startup():
            await schema.ensure_schema()
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(projects_router.router, prefix=config.api_prefix(), tags=["projects"])
app.include_router(reports_router.router, prefix=config.api_prefix(), tags=["reports"])
app.include_router(analytics_router.router, prefix=config.api_prefix(), tags=["analytics"])


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request.", "error": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(OperationFailed)
async def operation_failed_handler(request: Request, exc: OperationFailed) -> JSONResponse:
    logger.error(
        "request_failed method=%s path=%s message=%r",
        request.method,
        request.url.path,
        exc.message,
        exc_info=exc.__cause__ or exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": exc.message, "error": exc.error},
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    level = config.log_level()
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("server_starting host=%s port=%s", config.host(), config.port())
    uvicorn.run(app, host=config.host(), port=config.port(), log_level=level)


if __name__ == "__main__":
    run()
