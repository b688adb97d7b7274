from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass
class Task:
    id: str
    title: str
    description: str = ""
    status: Any = "pending"
    remarks: Any = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
