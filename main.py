import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from core.config import settings
from core.database import Base, engine
from core.errors import ContentValidationError, NotFoundError, StorageError
from core.logging_config import setup_logging
from routers import project_router, section_router, element_router, media_router, about_router, embed_router
from models import project, section, media, about

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Portfolio CMS API")

# Respect X-Forwarded-Proto/Host when behind a proxy (Docker/nginx/etc.)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(project_router.router)
app.include_router(section_router.router)
app.include_router(element_router.router)
app.include_router(media_router.router)
app.include_router(about_router.router)
app.include_router(embed_router.router)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _upstream_message(exc: Exception, generic: str) -> str:
    return str(exc) if settings.EXPOSE_ERRORS else generic


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail
    status_code = exc.status_code
    # Unknown path and unsupported method on a known path both read as a missing route
    if (status_code, message) in ((404, "Not Found"), (405, "Method Not Allowed")):
        status_code, message = 404, "Route not found"
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    return _error(422, problems or "Invalid request")


@app.exception_handler(ContentValidationError)
async def content_validation_handler(request: Request, exc: ContentValidationError):
    return _error(400, str(exc))


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _error(404, str(exc))


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return _error(500, _upstream_message(exc, "Object storage error"))


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error(500, _upstream_message(exc, "Internal server error"))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, _upstream_message(exc, "Internal server error"))


@app.get("/")
def root():
    return {"message": "Portfolio CMS API", "status": "running"}


@app.get("/health")
def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
