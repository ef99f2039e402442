"""Run the mock server under uvicorn.

Usage:
    python -m mailchimp_mock [--host HOST] [--port PORT] [--fixture PATH]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import uvicorn

from .config import get_settings
from .errors import FixtureLoadError
from .main import create_app

logger = logging.getLogger("mailchimp_mock")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mailchimp_mock", description=__doc__.splitlines()[0])
    parser.add_argument("--host", help="bind address (default from MOCK_HOST)")
    parser.add_argument("--port", type=int, help="bind port (default from MOCK_PORT)")
    parser.add_argument("--fixture", type=Path, help="fixture JSON file (default from MOCK_FIXTURE_PATH)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {
        key: value
        for key, value in (("host", args.host), ("port", args.port), ("fixture_path", args.fixture))
        if value is not None
    }
    settings = get_settings().model_copy(update=overrides)

    try:
        app = create_app(settings)
    except FixtureLoadError as exc:
        logger.error("fixture_load_failed: %s", exc)
        return 1

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
