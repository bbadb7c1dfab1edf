"""Liveness endpoint."""

from fastapi import APIRouter

from backend.api.models.schemas import HealthResponse
from backend.core.config import settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", version=settings.VERSION)
