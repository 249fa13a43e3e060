import logging

import uvicorn

from .config import settings


def main():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run("tripbooking.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
