from __future__ import annotations

from fastapi import APIRouter

from preempt.core.config import get_settings

router = APIRouter()


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "environment": get_settings().app_env}
