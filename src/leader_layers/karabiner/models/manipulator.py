from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .condition import VarCondition
from .from_event import FromEvent
from .to_event import ToEvent


class Manipulator(BaseModel):
    """Karabiner `basic` manipulator model."""

    model_config = ConfigDict(populate_by_name=True)

    description: Optional[str] = None
    type: str = "basic"
    from_: FromEvent = Field(alias="from")
    to: List[ToEvent] = Field(default_factory=list)
    conditions: List[VarCondition] = Field(default_factory=list)
