"""Public routes: root, bands."""
from fastapi import APIRouter

from config import BAND_DEFINITIONS

router = APIRouter()


@router.get("/")
async def root():
    return {"message": "Antenna Design Calculator API"}


@router.get("/bands")
async def get_bands():
    return BAND_DEFINITIONS
