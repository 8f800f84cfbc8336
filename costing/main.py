from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import calculate, seed

logger = logging.getLogger("costing")
logger.setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(
    title=settings.APP_NAME,
    description="Cost and yield calculator for stamped-metal packaged goods",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculate.router, prefix="/api")
app.include_router(seed.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "dockfinity-costing"}
