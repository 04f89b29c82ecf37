"""
GBAIRAI - FastAPI Application
Point d'entrée de l'API
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import time

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from gbairai.api.router import api_router
from gbairai.core.config import settings
from gbairai.core.logger import configure_logging, get_traced_logger
from gbairai.core.trace_context import TRACE_HEADER, bind_trace_id, reset_trace_id

configure_logging(settings.log_level)

logger = get_traced_logger("Main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application"""
    logger.info(
        "Starting Gbairai application",
        metadata={
            "version": settings.app_version,
            "environment": settings.environment,
            "llm_available": settings.is_llm_available(),
            "moderation_fail_open": settings.moderation_fail_open,
        },
    )
    yield
    logger.info("Shutting down Gbairai application")


app = FastAPI(
    title=settings.app_name,
    description="""
    Gbairai: le réseau social des gbairais ivoiriens

    Modération de contenu (liste noire + IA), validation,
    analyse d'émotion en français et nouchi, fils de réponses.
    """,
    version=settings.app_version,
    openapi_url=f"{settings.api_prefix}/openapi.json",
    docs_url=f"{settings.api_prefix}/docs",
    redoc_url=f"{settings.api_prefix}/redoc",
    lifespan=lifespan,
)


class TraceIDMiddleware(BaseHTTPMiddleware):
    """Attribue un trace_id à chaque requête et le renvoie dans X-Trace-ID"""

    async def dispatch(self, request: Request, call_next):
        trace_id, token = bind_trace_id(request.headers.get(TRACE_HEADER))
        start = time.monotonic()

        try:
            logger.info(
                "Request received",
                metadata={
                    "method": request.method,
                    "path": request.url.path,
                },
            )

            response: Response = await call_next(request)

            duration_ms = round((time.monotonic() - start) * 1000, 1)
            response.headers[TRACE_HEADER] = trace_id

            logger.info(
                "Response sent",
                metadata={
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            return response
        finally:
            reset_trace_id(token)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# à l'intérieur du CORS
app.add_middleware(TraceIDMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Un detail de type dict devient le corps JSON: {"error": "..."}"""
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Corps de requête mal formé: 400 avec le détail des champs"""
    logger.info(
        "Request validation failed",
        metadata={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Requête invalide", "details": jsonable_encoder(exc.errors())},
    )


app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Informations sur l'API"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Gbairai social network API",
        "docs": f"{settings.api_prefix}/docs",
    }


@app.get(f"{settings.api_prefix}/health")
async def health_check():
    """Santé du service"""
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
        "llm_available": settings.is_llm_available(),
    }
