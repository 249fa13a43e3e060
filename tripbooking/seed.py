import logging

from sqlalchemy.orm import Session

from .models import Destination, Trip, Customer, Meeting

logger = logging.getLogger("storage")


def seed_data(db: Session):
    """
    Inserts the fixed sample dataset used by the in-memory database.
    Runs once, right after the tables are created.
    """
    destinations = [
        Destination(zone="Asia"),
        Destination(zone="Europe"),
        Destination(zone="America"),
    ]
    db.add_all(destinations)
    db.flush()  # assigns ids 1..3

    trips = [
        Trip(
            name="Bangkok Street Food Tour",
            country="Thailand",
            destinationid=destinations[0].idx,
            coverimage="https://example.com/images/bangkok.jpg",
            detail="Five days of night markets, temples and river cruises.",
            price=1200.0,
            duration=5,
        ),
        Trip(
            name="Swiss Alps Explorer",
            country="Switzerland",
            destinationid=destinations[1].idx,
            coverimage="https://example.com/images/alps.jpg",
            detail="Scenic trains, glacier hikes and lakeside villages.",
            price=2500.0,
            duration=7,
        ),
    ]

    customer = Customer(
        fullname="Somchai Jaidee",
        phone="0812345678",
        email="somchai@example.com",
        image="https://example.com/images/somchai.jpg",
        password="password123",
    )

    meeting = Meeting(
        detail="Meet at the main entrance of Suvarnabhumi Airport",
        meetingdatetime="2024-06-01 08:00:00",
        latitude=13.6900,
        longitude=100.7501,
    )

    db.add_all(trips)
    db.add(customer)
    db.add(meeting)
    db.commit()

    logger.info(
        f"Seeded {len(destinations)} destinations, {len(trips)} trips, 1 customer and 1 meeting."
    )
