# api/server.py
"""
Launcher: serves the app with uvicorn and opens the page in a browser.

    python -m api.server [--host HOST] [--port PORT] [--no-browser]
"""

import argparse
import logging
import threading
import time
import webbrowser
from dataclasses import replace
from typing import Optional

import uvicorn

from api.config import Settings
from api.main import create_app

log = logging.getLogger("eq_rows.server")


def open_browser(url: str, delay: float = 1.0) -> None:
    # give uvicorn a moment to bind before the page polls /eq-rows
    time.sleep(delay)
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as exc:
        log.warning("Browser can not be opened: %s", exc)
        return
    if not opened:
        log.warning("Browser can not be opened for %s", url)


def run(settings: Settings) -> None:
    app = create_app(settings)
    url = f"{settings.local_url}/static/"

    if settings.open_browser:
        threading.Thread(target=open_browser, args=(url,), daemon=True).start()

    log.info("Server run: %s", settings.local_url)
    # uvicorn exits the process with status 1 when the port cannot be bound
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve recent AFAD earthquakes as an HTML table.")
    parser.add_argument("--host", help="interface to bind (default from EQ_ROWS_HOST)")
    parser.add_argument("--port", type=int, help="port to bind (default 8082)")
    parser.add_argument("--no-browser", action="store_true", help="do not open a browser tab")
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    settings = Settings.from_env()

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.no_browser:
        overrides["open_browser"] = False
    settings = replace(settings, **overrides)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(settings)


if __name__ == "__main__":
    main()
