from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from threading import RLock
from typing import List, Optional

from ..schemas import TaskCreate, TaskUpdate
from .models import TaskEntity


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for quest storage backends."""

    @abstractmethod
    def create(self, data: TaskCreate) -> TaskEntity:
        """Create and return a new TaskEntity."""

    @abstractmethod
    def get(self, task_id: str) -> Optional[TaskEntity]:
        """Return a TaskEntity by id, or None if not found."""

    @abstractmethod
    def update(self, task_id: str, data: TaskUpdate) -> Optional[TaskEntity]:
        """Update fields of an existing TaskEntity. Return updated entity or None if not found."""

    @abstractmethod
    def delete(self, task_id: str) -> bool:
        """Delete a TaskEntity by id. Return True if deleted, False if not found."""

    @abstractmethod
    def list(self) -> List[TaskEntity]:
        """Return every TaskEntity, newest first."""


class InMemoryRepository(Repository):
    """
    Thread-safe in-memory repository. FastAPI runs sync endpoints in a
    threadpool, hence the lock.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        # Insertion order is creation order.
        self._items: dict[str, TaskEntity] = {}
        self._next_id = 1

    def _now(self) -> datetime:
        return datetime.now()

    def _allocate_id(self) -> str:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return str(i)

    def create(self, data: TaskCreate) -> TaskEntity:
        now = self._now()
        entity: TaskEntity = {
            "id": self._allocate_id(),
            "title": data.title,
            "description": data.description,
            "priority": data.priority.value,
            "completed": False,
            "created_at": now,
            "updated_at": now,
        }
        with self._lock:
            self._items[entity["id"]] = entity
        return entity.copy()

    def get(self, task_id: str) -> Optional[TaskEntity]:
        with self._lock:
            item = self._items.get(task_id)
            return None if item is None else item.copy()

    def update(self, task_id: str, data: TaskUpdate) -> Optional[TaskEntity]:
        with self._lock:
            existing = self._items.get(task_id)
            if existing is None:
                return None

            # Update only provided fields
            updated = existing.copy()
            if data.title is not None:
                updated["title"] = data.title
            if data.description is not None:
                updated["description"] = data.description
            if data.priority is not None:
                updated["priority"] = data.priority.value
            if data.completed is not None:
                updated["completed"] = data.completed
            updated["updated_at"] = self._now()

            self._items[task_id] = updated
            return updated.copy()

    def delete(self, task_id: str) -> bool:
        with self._lock:
            return self._items.pop(task_id, None) is not None

    def list(self) -> List[TaskEntity]:
        with self._lock:
            return [t.copy() for t in reversed(list(self._items.values()))]
