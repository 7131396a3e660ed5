# app/routers/trucks.py
"""Truck fleet — CRUD and paginated listing. Thin dispatch to TruckService."""

from typing import Annotated
from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from app.auth.basic_auth import ROLE_ADMIN, get_current_user, require_roles
from app.config import settings
from app.database import get_db
from app.repositories.paging import PageRequest
from app.repositories.truck_repository import TruckRepository
from app.schemas.page import PageOut
from app.schemas.truck import TruckDTO
from app.services.truck_service import TruckService

router = APIRouter(prefix="/trucks", dependencies=[Depends(get_current_user)])

admin_only = [Depends(require_roles(ROLE_ADMIN))]

# Bounds keep ids inside the Integer column and page * size inside a 64-bit OFFSET
MAX_TRUCK_ID = 2**31 - 1
MAX_PAGE_INDEX = 2**31 - 1
MAX_PAGE_SIZE = 1000

TruckId = Annotated[int, Path(ge=1, le=MAX_TRUCK_ID)]


def get_truck_service(db: Session = Depends(get_db)) -> TruckService:
    return TruckService(TruckRepository(db))


@router.get("", response_model=list[TruckDTO], summary="List all trucks")
def get_all_trucks(service: TruckService = Depends(get_truck_service)):
    return service.get_all_trucks()


# Declared before /{truck_id} so "paginated" is never parsed as an id
@router.get("/paginated", response_model=PageOut[TruckDTO], summary="List trucks one page at a time")
def get_paginated_trucks(
    page: int = Query(0, ge=0, le=MAX_PAGE_INDEX, description="Zero-based page index"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: list[str] = Query([settings.DEFAULT_SORT], description="field,direction e.g. model,desc"),
    service: TruckService = Depends(get_truck_service),
):
    page_request = PageRequest.from_sort_params(page, size, sort)
    return PageOut[TruckDTO].from_page(service.get_truck_by_pagination(page_request))


@router.get("/{truck_id}", response_model=TruckDTO, summary="Get one truck")
def get_truck_by_id(truck_id: TruckId, service: TruckService = Depends(get_truck_service)):
    return service.get_truck_by_id(truck_id)


@router.post("", response_model=TruckDTO, dependencies=admin_only, summary="Register a truck")
def create_truck(body: TruckDTO, service: TruckService = Depends(get_truck_service)):
    """Status is matched case-insensitively; the response carries the assigned id."""
    return service.create_truck(body)


@router.put("/{truck_id}", response_model=TruckDTO, dependencies=admin_only, summary="Replace a truck")
def update_truck(truck_id: TruckId, body: TruckDTO, service: TruckService = Depends(get_truck_service)):
    return service.update_truck(truck_id, body)


@router.delete("/{truck_id}", response_class=PlainTextResponse, dependencies=admin_only,
               summary="Delete a truck")
def delete_truck(truck_id: TruckId, service: TruckService = Depends(get_truck_service)):
    service.delete_truck(truck_id)
    return f"Truck with Id: {truck_id} Deleted Successfully"
