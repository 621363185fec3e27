#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -e .
#setup: python -m hello_world   (or: flask --app hello_world.app run --port 8080)

"""Command-line entry point that runs the development server."""

import logging
import sys

from pydantic import ValidationError

from hello_world.app import create_app
from hello_world.core.config import get_settings

logger = logging.getLogger("hello_world")


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("Invalid settings: %s", exc.errors())
        return 1

    logging.getLogger().setLevel(settings.log_level)

    app = create_app(settings)
    logger.info("Serving on http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
