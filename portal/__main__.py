"""Run the API server: ``python -m portal``."""

import uvicorn

from portal.config import settings


def main():
    uvicorn.run("portal.main:app", host="0.0.0.0", port=settings.SERVER_PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    main()
