from typing import Optional

from pydantic import BaseModel

# Every body field is optional: a field left out of the request is stored as NULL.
# There is no server-side defaulting beyond that.


class DestinationWrite(BaseModel):
    zone: Optional[str] = None


class TripWrite(BaseModel):
    name: Optional[str] = None
    country: Optional[str] = None
    destinationid: Optional[int] = None
    coverimage: Optional[str] = None
    detail: Optional[str] = None
    price: Optional[float] = None
    duration: Optional[int] = None


class CustomerUpdate(BaseModel):
    fullname: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None


class CustomerCreate(CustomerUpdate):
    # The password is only set on create, updates leave it untouched.
    password: Optional[str] = None


class CustomerLogin(BaseModel):
    phone: Optional[str] = None
    password: Optional[str] = None


class MeetingWrite(BaseModel):
    detail: Optional[str] = None
    meetingdatetime: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class BookingWrite(BaseModel):
    customerid: Optional[int] = None
    bookdatetime: Optional[str] = None
    tripid: Optional[int] = None
    meetingid: Optional[int] = None
