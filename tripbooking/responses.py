from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def handle_response(
        data: Any = None,
        error: Optional[Exception] = None,
        not_found_status: int = status.HTTP_404_NOT_FOUND,
        not_found_message: str = "Not found",
        changes: Optional[int] = None,
) -> JSONResponse:
    """
    Turns the outcome of one storage call into the HTTP response.

    - A storage error always wins and becomes a 500 carrying its message.
    - When `changes` is given (update/delete), zero affected rows means the
      id was not found. Otherwise a missing `data` means not found.
    - Anything else is a 200 with `data` as the body.

    Zero affected rows is the only not-found signal for mutations, so an
    update of a missing id and any other statement that touches no row
    look the same to the caller.
    """
    if error is not None:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(error)},
        )

    if changes is not None:
        found = changes > 0
    else:
        found = data is not None

    if not found:
        return JSONResponse(status_code=not_found_status, content={"error": not_found_message})

    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(data))
