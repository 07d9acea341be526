from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from preempt.db.session import get_session
from preempt.repositories import contexts as contexts_repo
from preempt.schemas import (
    ContextCollection,
    ContextCreate,
    ContextExceptionCreate,
    ContextExceptionRead,
    ContextRead,
)
from preempt.services import catalog

router = APIRouter()


@router.get("/", response_model=ContextCollection)
def list_contexts(session: Session = Depends(get_session)) -> ContextCollection:
    items = contexts_repo.list_contexts(session)
    return ContextCollection(items=items)


@router.post("/", response_model=ContextRead, status_code=status.HTTP_201_CREATED)
def create_context(payload: ContextCreate, session: Session = Depends(get_session)) -> ContextRead:
    try:
        context = catalog.add_context(
            session,
            name=payload.name,
            days=payload.days,
            start_time=payload.start_time,
            end_time=payload.end_time,
            transition_minutes=payload.transition_minutes,
        )
    except catalog.DuplicateNameError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    session.commit()
    session.refresh(context)
    return ContextRead.model_validate(context, from_attributes=True)


@router.get("/{context_name}", response_model=ContextRead)
def get_context(context_name: str, session: Session = Depends(get_session)) -> ContextRead:
    context = contexts_repo.get_context_by_name(session, context_name)
    if context is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Context not found")
    return ContextRead.model_validate(context, from_attributes=True)


@router.post(
    "/{context_name}/exceptions",
    response_model=ContextExceptionRead,
    status_code=status.HTTP_201_CREATED,
)
def add_context_exception(
    context_name: str,
    payload: ContextExceptionCreate,
    session: Session = Depends(get_session),
) -> ContextExceptionRead:
    try:
        exception = catalog.add_context_exception(
            session,
            context_name,
            day=payload.day,
            start_time=payload.start_time,
            end_time=payload.end_time,
            transition_minutes=payload.transition_minutes,
        )
    except catalog.NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    session.commit()
    return ContextExceptionRead.model_validate(exception, from_attributes=True)


@router.delete("/{context_name}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_context(context_name: str, session: Session = Depends(get_session)) -> Response:
    context = contexts_repo.get_context_by_name(session, context_name)
    if context is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Context not found")
    contexts_repo.delete_context(session, context_name)
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
