"""
View-state controller for the quest log.

The controller owns the local, ordered list of quests and mediates every call
to the Task API. Each operation performs one round trip and applies its local
mutation only after the response arrives. Failures never propagate to the
caller; they are reduced to one fixed message per operation in `last_error`.

Ordering policy: newest first. Freshly created quests are prepended, which is
also the order the reference service lists them in.

Concurrency: operations may overlap on the event loop. Requests are never
cancelled or de-duplicated; each operation applies its effect when it
resolves, in resolution order, and the list keeps ids unique.
`pending` stays true while any refresh is in flight.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from .client import TaskAPIClient, TaskAPIError
from .schemas import Priority, Task
from .settings import Settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class ControllerError(str, Enum):
    """Failure categories. The value is the message shown to the user."""

    LOAD_FAILED = "Failed to load quests"
    CREATE_FAILED = "Could not forge the quest"
    UPDATE_FAILED = "Spell fizzled: update failed"
    DELETE_FAILED = "Could not banish the quest"


@dataclass
class TaskDraft:
    """Input-field state for the next quest. Priority survives a successful create."""

    title: str = ""
    description: str = ""
    priority: Union[Priority, str] = Priority.COMMON

    def clear_text(self) -> None:
        """Reset title and description after a successful create."""
        self.title = ""
        self.description = ""


# PUBLIC_INTERFACE
@dataclass
class QuestLogController:
    """
    Owns `tasks`, `last_error` and the draft; talks to the API through `client`.

    Usage:
        async with QuestLogController.from_settings() as quests:
            await quests.create("Slay the bug", priority="epic")
    """

    client: TaskAPIClient
    owns_client: bool = False
    tasks: List[Task] = field(default_factory=list)
    last_error: Optional[str] = None
    draft: TaskDraft = field(default_factory=TaskDraft)
    _refreshes_in_flight: int = field(default=0, init=False, repr=False)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "QuestLogController":
        return cls(client=TaskAPIClient.from_settings(settings), owns_client=True)

    async def __aenter__(self) -> "QuestLogController":
        await self.refresh()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self.owns_client:
            await self.client.aclose()

    @property
    def pending(self) -> bool:
        """True while at least one refresh is in flight."""
        return self._refreshes_in_flight > 0

    def _fail(self, error: ControllerError, exc: TaskAPIError) -> None:
        logger.warning("%s (%s)", error.value, exc)
        self.last_error = error.value

    def find(self, task_id: str) -> Optional[Task]:
        """Return the local quest with this id, or None."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    async def refresh(self) -> None:
        """Reload the whole list. Keeps the current list if the load fails."""
        self._refreshes_in_flight += 1
        self.last_error = None
        try:
            tasks = await self.client.list_tasks()
        except TaskAPIError as e:
            self._fail(ControllerError.LOAD_FAILED, e)
        else:
            self.tasks = tasks
            logger.debug("Loaded %d quests", len(tasks))
        finally:
            self._refreshes_in_flight -= 1

    async def create(
        self,
        title: str,
        description: str = "",
        priority: Union[Priority, str, None] = None,
    ) -> Optional[Task]:
        """
        Forge a quest and put the server's copy first.

        Blank titles are ignored without a request. Priority defaults to the
        draft's selection and is passed through unvalidated.
        """
        if not title.strip():
            return None
        if priority is None:
            priority = self.draft.priority
        try:
            task = await self.client.create_task(title, description, priority)
        except TaskAPIError as e:
            self._fail(ControllerError.CREATE_FAILED, e)
            return None
        # A refresh may already have delivered this quest; keep ids unique.
        self.tasks = [task, *(t for t in self.tasks if t.id != task.id)]
        self.draft.clear_text()
        logger.debug("Forged quest id=%s", task.id)
        return task

    async def submit_draft(self) -> Optional[Task]:
        """Create a quest from the draft fields."""
        return await self.create(self.draft.title, self.draft.description, self.draft.priority)

    async def toggle_complete(self, task_id: str) -> Optional[Task]:
        """
        Ask the server to flip `completed` and adopt its full representation.

        An id missing locally is still sent (as an incomplete quest); the
        response then matches nothing in the list.
        """
        current = self.find(task_id)
        completed = current.completed if current is not None else False
        try:
            task = await self.client.update_task(task_id, completed=not completed)
        except TaskAPIError as e:
            self._fail(ControllerError.UPDATE_FAILED, e)
            return None
        self.tasks = [task if t.id == task_id else t for t in self.tasks]
        return task

    async def remove(self, task_id: str) -> bool:
        """Delete a quest; it leaves the local list only once the server confirms."""
        try:
            await self.client.delete_task(task_id)
        except TaskAPIError as e:
            self._fail(ControllerError.DELETE_FAILED, e)
            return False
        self.tasks = [t for t in self.tasks if t.id != task_id]
        return True
