"""Run the API server: ``python -m hostel_leave``."""

import uvicorn

from hostel_leave.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "hostel_leave.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_config=None,
    )


if __name__ == "__main__":
    main()
