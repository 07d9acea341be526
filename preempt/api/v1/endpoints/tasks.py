from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from preempt.db.session import get_session
from preempt.repositories import tasks as tasks_repo
from preempt.schemas import TaskCollection, TaskCreate, TaskRead, TaskUpdate
from preempt.services import catalog

router = APIRouter()


@router.get("/", response_model=TaskCollection)
def list_tasks(session: Session = Depends(get_session)) -> TaskCollection:
    items = tasks_repo.list_tasks(session)
    return TaskCollection(items=items)


@router.post("/", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(payload: TaskCreate, session: Session = Depends(get_session)) -> TaskRead:
    try:
        task = catalog.add_task(
            session,
            name=payload.name,
            description=payload.description,
            priority=payload.priority,
            duration_minutes=payload.duration_minutes,
            context=payload.context_name,
        )
    except catalog.DuplicateNameError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except catalog.UnknownContextError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    session.commit()
    session.refresh(task)
    return TaskRead.model_validate(task, from_attributes=True)


@router.get("/{task_name}", response_model=TaskRead)
def get_task(task_name: str, session: Session = Depends(get_session)) -> TaskRead:
    task = tasks_repo.get_task_by_name(session, task_name)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return TaskRead.model_validate(task, from_attributes=True)


@router.patch("/{task_name}", response_model=TaskRead)
def update_task(task_name: str, payload: TaskUpdate, session: Session = Depends(get_session)) -> TaskRead:
    changes = {
        field: value
        for field, value in payload.model_dump(exclude_unset=True).items()
        if value is not None or field == "context_name"
    }
    try:
        task = catalog.update_task(session, task_name, **changes)
    except catalog.NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except catalog.UnknownContextError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    session.commit()
    session.refresh(task)
    return TaskRead.model_validate(task, from_attributes=True)


@router.delete("/{task_name}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_task(task_name: str, session: Session = Depends(get_session)) -> Response:
    task = tasks_repo.get_task_by_name(session, task_name)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    tasks_repo.delete_task(session, task_name)
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
