from typing import Optional, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from .. import crud, schemas
from ..crud import Resource
from ..database import get_storage
from ..exceptions import StorageError
from ..responses import handle_response
from ..storage import StorageGateway


def _body_fields(body: Optional[BaseModel]) -> dict:
    # No body at all means every field is absent and stored as NULL.
    if body is None:
        return {}
    return body.model_dump()


def build_crud_router(
        resource: Resource,
        prefix: str,
        tag: str,
        create_schema: Type[BaseModel],
        update_schema: Optional[Type[BaseModel]] = None,
) -> APIRouter:
    """
    Builds the five CRUD routes of one resource.

    Each route runs a single statement and hands the outcome to
    handle_response, which picks the status code.
    """
    update_schema = update_schema or create_schema
    label = resource.label
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("")
    def read_items(storage: StorageGateway = Depends(get_storage)):
        try:
            rows = crud.list_items(storage, resource)
        except StorageError as e:
            return handle_response(error=e)
        return handle_response(rows)

    @router.get("/{item_id}")
    def read_item(item_id: int, storage: StorageGateway = Depends(get_storage)):
        try:
            row = crud.get_item(storage, resource, item_id)
        except StorageError as e:
            return handle_response(error=e)
        return handle_response(row, not_found_message=resource.not_found_message)

    @router.post("")
    def create_item(body: Optional[create_schema] = None, storage: StorageGateway = Depends(get_storage)):
        try:
            result = crud.create_item(storage, resource, _body_fields(body))
        except StorageError as e:
            return handle_response(error=e)
        return handle_response(
            {"message": f"{label} created successfully", "id": result.last_insert_id},
            not_found_status=500,
            not_found_message=f"Failed to create {label.lower()}",
        )

    @router.put("/{item_id}")
    def update_item(item_id: int, body: Optional[update_schema] = None, storage: StorageGateway = Depends(get_storage)):
        try:
            result = crud.update_item(storage, resource, item_id, _body_fields(body))
        except StorageError as e:
            return handle_response(error=e)
        return handle_response(
            {"message": f"{label} updated successfully"},
            not_found_message=resource.not_found_message,
            changes=result.rows_affected,
        )

    @router.delete("/{item_id}")
    def delete_item(item_id: int, storage: StorageGateway = Depends(get_storage)):
        try:
            result = crud.delete_item(storage, resource, item_id)
        except StorageError as e:
            return handle_response(error=e)
        return handle_response(
            {"message": f"{label} deleted successfully"},
            not_found_message=resource.not_found_message,
            changes=result.rows_affected,
        )

    return router


destination_router = build_crud_router(
    crud.destinations, "/destinations", "Destinations", schemas.DestinationWrite
)
trip_router = build_crud_router(
    crud.trips, "/trips", "Trips", schemas.TripWrite
)
customer_router = build_crud_router(
    crud.customers, "/customers", "Customers", schemas.CustomerCreate, schemas.CustomerUpdate
)
meeting_router = build_crud_router(
    crud.meetings, "/meetings", "Meetings", schemas.MeetingWrite
)
booking_router = build_crud_router(
    crud.bookings, "/bookings", "Bookings", schemas.BookingWrite
)
