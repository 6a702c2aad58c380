from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .key_code import KeyCode
from .modifiers import FromModifiers


class FromEvent(BaseModel):
    """
    Karabiner `from` event model.

    https://karabiner-elements.pqrs.org/docs/json/complex-modifications-manipulator-definition/from/
    """

    key_code: KeyCode
    modifiers: Optional[FromModifiers] = None
