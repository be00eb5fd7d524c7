"""Kartao server runner."""

import uvicorn

from .api import create_app
from .config import Settings


def run(settings: Settings | None = None) -> None:
    """Serve the API until interrupted."""
    settings = settings or Settings()
    app = create_app(settings)
    # Logging is set up by setup_logging(); keep uvicorn from replacing it.
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
