from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class TaskUpdate(BaseModel):
    """Fields written verbatim onto the task; anything goes, missing means null."""

    status: Any = None
    remarks: Any = None


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str
    description: Optional[str] = ""
    status: Any = None
    remarks: Any = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class TaskUpdated(BaseModel):
    message: str
    task: TaskOut
