"""Run the API with uvicorn: ``python -m userservice``."""
import uvicorn

from userservice.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "userservice.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
