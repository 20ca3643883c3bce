"""Run the employee API with uvicorn: ``python -m employee_api``."""
import uvicorn

from .config import get_settings
from .logging_config import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "employee_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
