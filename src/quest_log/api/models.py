from __future__ import annotations

from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class TaskEntity(TypedDict):
    """
    Storage record of a quest in the reference service.

    Fields:
    - id: Opaque string identifier assigned on create
    - title: Display title (1..200 chars, trimmed on input via schemas)
    - description: Details, empty string when absent
    - priority: One of common, rare, epic, legendary
    - completed: Boolean completion flag
    - created_at: Local creation timestamp, used for list order
    - updated_at: Local last update timestamp
    """

    id: str
    title: str
    description: str
    priority: str
    completed: bool
    created_at: datetime
    updated_at: datetime
