"""Slim entry point – wires up all modular routers."""
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
import logging

from config import CORS_ORIGINS, LOG_LEVEL
from routes.antenna import router as antenna_router
from routes.public import router as public_router

app = FastAPI(title="Antenna Design Calculator")

# ── Route routers (all prefixed with /api) ──
app.include_router(public_router, prefix="/api")
app.include_router(antenna_router, prefix="/api")

# ── CORS ──
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Logging ──
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)
logger.info(f"Antenna design API ready (CORS origins: {', '.join(CORS_ORIGINS)})")
