from sqlalchemy import Column, Integer, String, Text, Float, ForeignKey

from .database import Base


# Foreign keys are declared for documentation only.
# SQLite does not enforce them unless PRAGMA foreign_keys is on, and we leave it off.

class Destination(Base):
    __tablename__ = "destination"
    __table_args__ = {"sqlite_autoincrement": True}

    idx = Column(Integer, primary_key=True)
    zone = Column(String, nullable=False)


class Trip(Base):
    __tablename__ = "trip"
    __table_args__ = {"sqlite_autoincrement": True}

    idx = Column(Integer, primary_key=True)
    name = Column(String)
    country = Column(String)
    destinationid = Column(Integer, ForeignKey("destination.idx"))
    coverimage = Column(String)
    detail = Column(Text)
    price = Column(Float)
    duration = Column(Integer)


class Customer(Base):
    __tablename__ = "customer"
    __table_args__ = {"sqlite_autoincrement": True}

    idx = Column(Integer, primary_key=True)
    fullname = Column(String)
    phone = Column(String, unique=True, nullable=False)
    email = Column(String)
    image = Column(String)
    # Stored as plain text, compared as-is on login.
    password = Column(String, nullable=False)


class Meeting(Base):
    __tablename__ = "meeting"
    __table_args__ = {"sqlite_autoincrement": True}

    idx = Column(Integer, primary_key=True)
    detail = Column(Text)
    meetingdatetime = Column(String)
    latitude = Column(Float)
    longitude = Column(Float)


class Booking(Base):
    __tablename__ = "booking"
    __table_args__ = {"sqlite_autoincrement": True}

    idx = Column(Integer, primary_key=True)
    customerid = Column(Integer, ForeignKey("customer.idx"))
    bookdatetime = Column(String)
    tripid = Column(Integer, ForeignKey("trip.idx"))
    meetingid = Column(Integer, ForeignKey("meeting.idx"))
