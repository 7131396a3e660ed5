# app/models/truck.py
"""
Trucks table — one row per fleet vehicle.
Status is stored as a closed enumeration; the wire layer speaks strings.
"""

import enum
from sqlalchemy import Column, Enum, Integer, String, Text
from app.database import Base


class TruckStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    IN_MAINTENANCE = "IN_MAINTENANCE"
    RETIRED = "RETIRED"


class Truck(Base):
    __tablename__ = "trucks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    model = Column(String(255), nullable=False)
    status = Column(Enum(TruckStatus, name="truck_status"), nullable=False)
    details = Column(Text)

    def __repr__(self):
        return f"<Truck {self.id} model={self.model} status={self.status}>"
