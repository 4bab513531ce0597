import uvicorn

from app.api.app import create_app
from app.core.config import Settings
from app.core.logging import setup_logging

settings = Settings()

setup_logging(settings)

app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=None,
    )
