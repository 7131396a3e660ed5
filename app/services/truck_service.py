# app/services/truck_service.py
"""
Truck lifecycle: mapping between the wire shape (TruckDTO) and the stored
Truck row, status validation, not-found semantics and page shaping.
The repository is injected at construction; routers build one per request.
"""

from app.models.truck import Truck, TruckStatus
from app.repositories.paging import Page, PageRequest
from app.repositories.truck_repository import TruckRepository
from app.schemas.truck import TruckDTO
from app.services.exceptions import InvalidTruckStatusError, TruckNotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def parse_status(raw) -> TruckStatus:
    """Upper-case the input and match it against TruckStatus by name."""
    if not isinstance(raw, str):
        raise InvalidTruckStatusError(raw)
    try:
        return TruckStatus[raw.upper()]
    except KeyError:
        logger.warning(f"Rejected truck status '{raw}'")
        raise InvalidTruckStatusError(raw)


def map_to_dto(truck: Truck) -> TruckDTO:
    return TruckDTO(
        id=truck.id,
        model=truck.model,
        status=TruckStatus(truck.status).name,
        details=truck.details,
    )


class TruckService:
    def __init__(self, repository: TruckRepository):
        self.repository = repository

    def get_all_trucks(self) -> list[TruckDTO]:
        return [map_to_dto(t) for t in self.repository.find_all()]

    def get_truck_by_id(self, truck_id: int) -> TruckDTO:
        truck = self.repository.find_by_id(truck_id)
        if truck is None:
            logger.warning(f"Truck {truck_id} not found")
            raise TruckNotFoundError(truck_id)
        return map_to_dto(truck)

    def create_truck(self, dto: TruckDTO) -> TruckDTO:
        """Incoming id is ignored; the store assigns a fresh one."""
        status = parse_status(dto.status)
        truck = Truck(model=dto.model, status=status, details=dto.details)
        saved = self.repository.save(truck)
        logger.info(f"Created truck {saved.id} ({saved.model}, {status.name})")
        return map_to_dto(saved)

    def update_truck(self, truck_id: int, dto: TruckDTO) -> TruckDTO:
        """Wholesale replace of model, status and details. No field merge."""
        truck = self.repository.find_by_id(truck_id)
        if truck is None:
            logger.warning(f"Truck {truck_id} not found for update")
            raise TruckNotFoundError(truck_id, f"Truck not found with ID to update :{truck_id}")

        # Validate before touching the row so a bad status leaves it unchanged
        status = parse_status(dto.status)
        truck.model = dto.model
        truck.status = status
        truck.details = dto.details

        updated = self.repository.save(truck)
        logger.info(f"Updated truck {truck_id} → {status.name}")
        return map_to_dto(updated)

    def delete_truck(self, truck_id: int) -> None:
        if not self.repository.exists_by_id(truck_id):
            logger.warning(f"Truck {truck_id} not found for delete")
            raise TruckNotFoundError(truck_id, f"Truck not found with ID to Delete :{truck_id}")
        self.repository.delete_by_id(truck_id)
        logger.info(f"Deleted truck {truck_id}")

    def get_truck_by_pagination(self, page_request: PageRequest) -> Page[TruckDTO]:
        return self.repository.find_all_paged(page_request).map(map_to_dto)
