import uvicorn
from dotenv import load_dotenv

from cardmaker.config import Settings, configure_logging
from cardmaker.server import create_app


def main() -> None:
    # Pick up CARDMAKER_* settings from a local .env file if present.
    load_dotenv()

    settings = Settings.from_env()
    configure_logging(settings.log_level)

    app = create_app(settings)
    print(f"Server listening on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
