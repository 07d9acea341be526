from __future__ import annotations

from fastapi import APIRouter

from preempt.api.v1.endpoints import contexts, health, scheduler, tasks

api_router = APIRouter()
api_router.include_router(health.router, tags=["system"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(contexts.router, prefix="/contexts", tags=["contexts"])
api_router.include_router(scheduler.router, prefix="/scheduler", tags=["scheduler"])
