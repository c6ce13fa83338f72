"""Run the API server with uvicorn using the configured host and port."""

import uvicorn

from roster.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "roster.api.app:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
