"""Pydantic models for the Task Manager API.

Request payloads carry their own validation so that handlers only ever see
well-formed input. Validators run in field order and the first failing rule
is the one reported back to the client.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MAX_LENGTH = 200


class TaskStatus(str, Enum):
    """Lifecycle state of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Relative importance of a task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _choice_error(field: str, enum_cls: type[Enum]) -> str:
    values = [member.value for member in enum_cls]
    return f"{field} must be {', '.join(values[:-1])}, or {values[-1]}"


def _parse_choice(field: str, enum_cls: type[Enum], value: Any, default: Any) -> Any:
    """Map an empty or missing value to ``default``, reject unknown members."""
    if value is None or value == "":
        return default
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(_choice_error(field, enum_cls)) from None


class TaskCreate(BaseModel):
    """Request body for creating a new task."""

    title: str = Field(
        default="",
        validate_default=True,
        description=f"The task title (required, 1-{TITLE_MAX_LENGTH} characters)",
    )
    description: str = Field(default="", description="Optional free-form details")
    priority: TaskPriority = Field(
        default=TaskPriority.MEDIUM,
        validate_default=True,
        description="Task priority, defaults to medium",
    )
    status: TaskStatus = Field(
        default=TaskStatus.PENDING,
        validate_default=True,
        description="Task status, defaults to pending",
    )

    @field_validator("title", "description", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        if not value:
            raise ValueError("title is required")
        if len(value) > TITLE_MAX_LENGTH:
            raise ValueError(f"title must be at most {TITLE_MAX_LENGTH} characters")
        return value

    @field_validator("priority", mode="before")
    @classmethod
    def _check_priority(cls, value: Any) -> Any:
        return _parse_choice("priority", TaskPriority, value, TaskPriority.MEDIUM)

    @field_validator("status", mode="before")
    @classmethod
    def _check_status(cls, value: Any) -> Any:
        return _parse_choice("status", TaskStatus, value, TaskStatus.PENDING)


class TaskUpdate(BaseModel):
    """Request body for a partial update.

    Omitted, null and empty fields all mean "leave unchanged".
    """

    title: str | None = Field(default=None, description="New title for the task")
    description: str | None = Field(default=None, description="New description")
    priority: TaskPriority | None = Field(default=None, description="New priority")
    status: TaskStatus | None = Field(default=None, description="New status")

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str | None) -> str | None:
        if value and len(value) > TITLE_MAX_LENGTH:
            raise ValueError(f"title must be at most {TITLE_MAX_LENGTH} characters")
        return value

    @field_validator("priority", mode="before")
    @classmethod
    def _check_priority(cls, value: Any) -> Any:
        return _parse_choice("priority", TaskPriority, value, None)

    @field_validator("status", mode="before")
    @classmethod
    def _check_status(cls, value: Any) -> Any:
        return _parse_choice("status", TaskStatus, value, None)

    def changes(self) -> dict[str, Any]:
        """Return only the fields that should overwrite the stored task."""
        return {
            name: value
            for name, value in self.model_dump(exclude_none=True).items()
            if value != ""
        }


class Task(BaseModel):
    """A task item in the task manager."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier for the task")
    title: str = Field(..., description="The task title")
    description: str = Field(default="", description="Free-form details")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Current status")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="Priority")
    created_at: datetime = Field(..., description="When the task was created")
    updated_at: datetime = Field(..., description="When the task was last updated")


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "healthy"
    service: str = "task-manager-backend"
