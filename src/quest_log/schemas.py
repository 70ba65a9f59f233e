from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# PUBLIC_INTERFACE
class Priority(str, Enum):
    """
    Rarity tag of a quest. Purely cosmetic; COMMON is the default.
    """

    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @classmethod
    def parse(cls, raw: Any) -> "Priority":
        """
        Map any incoming value to a Priority.
        Absent, null, or unrecognized values become COMMON.
        """
        if isinstance(raw, cls):
            return raw
        if not raw or not isinstance(raw, str):
            return cls.COMMON
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.COMMON

    @property
    def label(self) -> str:
        return self.value.capitalize()


def _clean_title(v: str) -> str:
    s = v.strip()
    if not (1 <= len(s) <= 200):
        raise ValueError("title length must be between 1 and 200 characters")
    return s


# PUBLIC_INTERFACE
class Task(BaseModel):
    """
    A quest as returned by the Task API.

    Priority is normalized here, once, when the record enters the system.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "42",
                "title": "Slay the bug",
                "description": "",
                "priority": "epic",
                "completed": False,
            }
        }
    )

    id: str = Field(..., description="Opaque identifier assigned by the API")
    title: str = Field(..., description="Display title of the quest")
    description: str = Field(default="", description="Optional details, may be empty")
    priority: Priority = Field(default=Priority.COMMON, description="Rarity tag")
    completed: bool = Field(default=False, description="Completion status flag")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        # Some backends hand out integer ids; treat them as opaque strings.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("description", mode="before")
    @classmethod
    def coerce_description(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("priority", mode="before")
    @classmethod
    def coerce_priority(cls, v: Any) -> Priority:
        return Priority.parse(v)

    @field_validator("completed", mode="before")
    @classmethod
    def coerce_completed(cls, v: Any) -> Any:
        return False if v is None else v


# PUBLIC_INTERFACE
class TaskList(BaseModel):
    """
    Envelope of the list endpoint. A missing `tasks` field means no tasks.
    """

    tasks: List[Task] = Field(default_factory=list, description="Quests in server order")

    @field_validator("tasks", mode="before")
    @classmethod
    def coerce_tasks(cls, v: Any) -> Any:
        return [] if v is None else v


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Schema for forging a new quest on the reference service.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Slay the bug",
                "description": "It lives in the parser",
                "priority": "epic",
            }
        }
    )

    title: str = Field(..., description="Display title of the quest", min_length=1, max_length=200)
    description: str = Field(default="", description="Optional details")
    priority: Priority = Field(default=Priority.COMMON, description="Rarity tag")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """
        Strip whitespace and enforce 1..200 length.
        """
        return _clean_title(v)

    @field_validator("description", mode="before")
    @classmethod
    def coerce_description(cls, v: Any) -> Any:
        return "" if v is None else v


# PUBLIC_INTERFACE
class TaskUpdate(BaseModel):
    """
    Schema for updating an existing quest.
    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"completed": True}}
    )

    title: Optional[str] = Field(default=None, description="Display title of the quest", min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, description="Optional details")
    priority: Optional[Priority] = Field(default=None, description="Rarity tag")
    completed: Optional[bool] = Field(default=None, description="Completion status flag")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        """
        If title is provided, strip whitespace and enforce 1..200 length.
        """
        if v is None:
            return v
        return _clean_title(v)
