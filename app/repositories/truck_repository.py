# app/repositories/truck_repository.py
"""
Persistence for the trucks table.
Each method is a single-table call; writes commit immediately.
"""

from typing import Optional
from sqlalchemy import asc, desc
from sqlalchemy.orm import Session
from app.models.truck import Truck
from app.repositories.paging import Page, PageRequest, SortDirection
from app.services.exceptions import InvalidSortError

SORTABLE_COLUMNS = {
    "id": Truck.id,
    "model": Truck.model,
    "status": Truck.status,
    "details": Truck.details,
}


class TruckRepository:
    def __init__(self, db: Session):
        self.db = db

    def save(self, truck: Truck) -> Truck:
        """Insert or update. The id is assigned by the database on first save."""
        self.db.add(truck)
        self.db.commit()
        self.db.refresh(truck)
        return truck

    def find_by_id(self, truck_id: int) -> Optional[Truck]:
        return self.db.query(Truck).filter(Truck.id == truck_id).first()

    def find_all(self) -> list[Truck]:
        return self.db.query(Truck).order_by(Truck.id.asc()).all()

    def find_all_paged(self, page_request: PageRequest) -> Page[Truck]:
        column = SORTABLE_COLUMNS.get(page_request.sort_field)
        if column is None:
            raise InvalidSortError(page_request.sort_field, "unknown truck property")

        order = asc(column) if page_request.direction == SortDirection.ASC else desc(column)
        total = self.db.query(Truck).count()
        # id as tie-breaker keeps page boundaries stable for non-unique sort keys
        rows = (
            self.db.query(Truck)
            .order_by(order, Truck.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )
        return Page(content=rows, total_elements=total, request=page_request)

    def exists_by_id(self, truck_id: int) -> bool:
        return self.db.query(Truck.id).filter(Truck.id == truck_id).first() is not None

    def delete_by_id(self, truck_id: int) -> None:
        self.db.query(Truck).filter(Truck.id == truck_id).delete()
        self.db.commit()
