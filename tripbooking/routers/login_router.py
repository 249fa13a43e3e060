from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from .. import crud, schemas
from ..database import get_storage
from ..exceptions import StorageError
from ..storage import StorageGateway

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post("/login")
def login(credentials: Optional[schemas.CustomerLogin] = None, storage: StorageGateway = Depends(get_storage)):
    """
    Plain-text phone + password lookup. No token or session is issued.
    """
    # A request without a body is treated like an empty one.
    credentials = credentials or schemas.CustomerLogin()
    if not credentials.phone or not credentials.password:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Phone and password are required"},
        )

    try:
        customer = crud.get_customer_by_credentials(storage, credentials.phone, credentials.password)
    except StorageError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": e.message},
        )

    if customer is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "Invalid phone or password"},
        )

    return {"message": "Login successful", "customer": customer}
