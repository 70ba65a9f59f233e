"""
Quest Log: a task tracker client with a reference Task API.

The view-state controller owns the local quest list and reconciles it with
the API after every round trip. The `quest_log.api` subpackage is a FastAPI
implementation of the same wire protocol.
"""

from .client import TaskAPIClient, TaskAPIError
from .controller import ControllerError, QuestLogController, TaskDraft
from .schemas import Priority, Task

__all__ = [
    "ControllerError",
    "Priority",
    "QuestLogController",
    "Task",
    "TaskAPIClient",
    "TaskAPIError",
    "TaskDraft",
]
