"""Command line interface to run the pact message inspection API."""

import uvicorn

from .api import app
from .config import settings


def main() -> None:
    """Run the Uvicorn server hosting the API."""
    try:
        settings.validate()
    except ValueError as e:
        print(f"Configuration Error: {e}")
        print("Please check your environment variables and try again.")
        return

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
