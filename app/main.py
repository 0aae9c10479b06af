import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from app.api import documentation
from app.core.config import settings
from app.core.exceptions import TransportError
from app.db.database import Base, engine
from app.db import models  # noqa: F401  registers ActivityLog on Base

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="API Documentation Portal")

origins = [
    "http://localhost:9680",
    "http://127.0.0.1:9680"
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

@app.exception_handler(TransportError)
async def upstream_failure_handler(request: Request, exc: TransportError):
    logger.error("Upstream failure serving %s: %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": f"Upstream service {exc.api} unavailable"})

app.include_router(documentation.router, prefix="/apis", tags=["Documentation"])

app.mount("/metrics", make_asgi_app())
