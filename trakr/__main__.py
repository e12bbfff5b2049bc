"""Run the Trakr API with uvicorn."""

import uvicorn

from trakr.core.config import settings


def main() -> None:
    uvicorn.run(
        "trakr.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
