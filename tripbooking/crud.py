from typing import Any, Optional, Sequence

from sqlalchemy import select, insert, update, delete, Table
from sqlalchemy.sql import Select

from . import models
from .storage import StorageGateway, MutationResult


class Resource:
    """
    Describes one CRUD resource: which table it lives in, which body fields
    are written on create and update, how rows are read back and which
    fields never leave the service.
    """

    def __init__(
            self,
            label: str,
            table: Table,
            fields: Sequence[str],
            update_fields: Optional[Sequence[str]] = None,
            read_select: Optional[Select] = None,
            redacted: Sequence[str] = (),
    ):
        self.label = label
        self.table = table
        self.fields = tuple(fields)
        self.update_fields = tuple(update_fields) if update_fields is not None else self.fields
        self.read_select = read_select if read_select is not None else select(table)
        self.redacted = tuple(redacted)

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    def sanitize(self, row: Optional[dict]) -> Optional[dict]:
        if row is None:
            return None
        return {key: value for key, value in row.items() if key not in self.redacted}


def _trip_read_select() -> Select:
    trip = models.Trip.__table__
    destination = models.Destination.__table__
    # Inner join: a trip whose destination row is gone is left out.
    return (
        select(
            trip.c.idx,
            trip.c.name,
            trip.c.country,
            trip.c.destinationid,
            trip.c.coverimage,
            trip.c.detail,
            trip.c.price,
            trip.c.duration,
            destination.c.zone.label("destination_zone"),
        )
        .select_from(trip)
        .join(destination, trip.c.destinationid == destination.c.idx)
    )


destinations = Resource(
    label="Destination",
    table=models.Destination.__table__,
    fields=("zone",),
)

trips = Resource(
    label="Trip",
    table=models.Trip.__table__,
    fields=("name", "country", "destinationid", "coverimage", "detail", "price", "duration"),
    read_select=_trip_read_select(),
)

customers = Resource(
    label="Customer",
    table=models.Customer.__table__,
    fields=("fullname", "phone", "email", "image", "password"),
    update_fields=("fullname", "phone", "email", "image"),
    redacted=("password",),
)

meetings = Resource(
    label="Meeting",
    table=models.Meeting.__table__,
    fields=("detail", "meetingdatetime", "latitude", "longitude"),
)

bookings = Resource(
    label="Booking",
    table=models.Booking.__table__,
    fields=("customerid", "bookdatetime", "tripid", "meetingid"),
)


def list_items(storage: StorageGateway, resource: Resource) -> list[dict[str, Any]]:
    rows = storage.query_all(resource.read_select)
    return [resource.sanitize(row) for row in rows]


def get_item(storage: StorageGateway, resource: Resource, item_id: int) -> Optional[dict[str, Any]]:
    stmt = resource.read_select.where(resource.table.c.idx == item_id)
    return resource.sanitize(storage.query_one(stmt))


def create_item(storage: StorageGateway, resource: Resource, data: dict) -> MutationResult:
    values = {field: data.get(field) for field in resource.fields}
    return storage.execute(insert(resource.table).values(**values))


def update_item(storage: StorageGateway, resource: Resource, item_id: int, data: dict) -> MutationResult:
    """
    Replaces every updatable column of the row, fields missing from `data`
    become NULL. There is no partial merge.
    """
    values = {field: data.get(field) for field in resource.update_fields}
    stmt = update(resource.table).where(resource.table.c.idx == item_id).values(**values)
    return storage.execute(stmt)


def delete_item(storage: StorageGateway, resource: Resource, item_id: int) -> MutationResult:
    stmt = delete(resource.table).where(resource.table.c.idx == item_id)
    return storage.execute(stmt)


def get_customer_by_credentials(storage: StorageGateway, phone: str, password: str) -> Optional[dict[str, Any]]:
    """
    Looks up the customer whose phone and password both match exactly.
    The password comes back stripped.
    """
    table = customers.table
    stmt = select(table).where(table.c.phone == phone, table.c.password == password)
    return customers.sanitize(storage.query_one(stmt))
