import uvicorn

from webloom.config import get_settings
from webloom.logging_config import configure_logging
from webloom.main import create_app


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
