# app/schemas/truck.py
from pydantic import BaseModel
from typing import Optional


class TruckDTO(BaseModel):
    """Wire shape of a truck. Status is free text on input, upper-case on output."""
    id: Optional[int] = None
    model: str
    status: str
    details: Optional[str] = None

    class Config:
        from_attributes = True
