"""Entry point: `python -m fitness_api` or the `fitness-api` script."""

import uvicorn

from fitness_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "fitness_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
