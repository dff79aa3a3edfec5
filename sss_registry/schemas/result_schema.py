from pydantic import BaseModel
from typing import Optional


class ActionResult(BaseModel):
    success: bool
    message: str
    id: Optional[int] = None
