from .context import ContextCollection, ContextCreate, ContextExceptionCreate, ContextExceptionRead, ContextRead
from .schedule import ContextTimelineRead, TimeBlockRead, TimelineRequest, TimelineResponse
from .task import TaskCollection, TaskCreate, TaskRead, TaskUpdate

__all__ = [
    "ContextCollection",
    "ContextCreate",
    "ContextExceptionCreate",
    "ContextExceptionRead",
    "ContextRead",
    "ContextTimelineRead",
    "TaskCollection",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "TimeBlockRead",
    "TimelineRequest",
    "TimelineResponse",
]
