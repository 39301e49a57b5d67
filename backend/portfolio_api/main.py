# portfolio_api/main.py
from __future__ import annotations

from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from portfolio_api.core.config import settings
from portfolio_api.core.logging import configure_logging
from portfolio_api.api.routes_medium import router as medium_router


BACKEND_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=BACKEND_ROOT / ".env", override=False)

VERSION = "1.0.0"

configure_logging("api")

app = FastAPI(title="Portfolio API", version=VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(medium_router, prefix="/api/medium", tags=["medium"])


@app.get("/health")
def health_check():
    return {"status": "ok", "version": VERSION}
