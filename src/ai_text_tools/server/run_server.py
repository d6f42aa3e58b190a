"""Launch the text tools API with uvicorn."""
from __future__ import annotations
import argparse
import logging

import uvicorn

from ai_text_tools.common.config import ConfigError, load_settings
from ai_text_tools.common.logging_setup import setup_logging
from ai_text_tools.server.fastapi_app import create_app

LOGGER = logging.getLogger("ai_text_tools.server")

def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Serve the AI text tools API and UI")
    ap.add_argument("--config", default=None, help="Optional YAML config path")
    args = ap.parse_args(argv)

    setup_logging()
    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        LOGGER.error("%s", e)
        raise SystemExit(1)
    setup_logging(settings.log_level)

    app = create_app(settings)
    LOGGER.info("Server listening on %s:%s (model=%s)", settings.host, settings.port, settings.model)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)

if __name__ == "__main__":
    main()
