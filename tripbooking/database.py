from fastapi import Request
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def get_storage(request: Request):
    # The gateway is opened once in the app lifespan and shared by every request.
    return request.app.state.storage
