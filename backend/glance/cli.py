"""
Command-line entry point for running the Glance server.

Usage:
    glance [--port PORT] [--host HOST] [--data-dir DIR] [--sample-data]
"""

import argparse
import logging
import os
import webbrowser
from datetime import date
from pathlib import Path

import qrcode
import uvicorn

from .config import Settings, ensure_data_dir, load_settings
from .services import RecordStore, load_sample_data

logger = logging.getLogger(__name__)


def print_qr_code(url: str) -> None:
    """Print a QR code to the terminal."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=1,
    )
    qr.add_data(url)
    qr.make(fit=True)

    # Print QR code using ASCII
    qr.print_ascii(invert=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Glance expense tracker")
    parser.add_argument("--port", type=int, default=8000, help="Port to run on")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--data-dir", help="Directory holding the store file")
    parser.add_argument("--log-level", help="Logging level (default: info)")
    parser.add_argument("--sample-data", action="store_true", help="Load demo expenses into an empty store")
    parser.add_argument("--no-browser", action="store_true", help="Don't open browser")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Settings from the environment, overridden by command-line flags."""
    data_dir = Path(args.data_dir).expanduser() if args.data_dir else None
    return load_settings(data_dir=data_dir, log_level=args.log_level)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # The server process re-reads settings from the environment
    os.environ["GLANCE_DATA_DIR"] = str(settings.data_dir)
    os.environ["GLANCE_LOG_LEVEL"] = settings.log_level

    if args.sample_data:
        ensure_data_dir(settings)
        store = RecordStore.open(settings.store_path)
        try:
            load_sample_data(store, date.today().replace(day=1))
        finally:
            store.close()

    url = f"http://{args.host}:{args.port}"

    print("\n" + "=" * 50)
    print("  Glance")
    print("=" * 50)
    print(f"\n  URL: {url}")
    print(f"  Data: {settings.store_path}\n")

    try:
        print_qr_code(url)
    except Exception:
        logger.debug("QR code unavailable", exc_info=True)

    print("\n  Press Ctrl+C to stop the server\n")
    print("=" * 50 + "\n")

    if not args.no_browser:
        webbrowser.open(url)

    uvicorn.run(
        "glance.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level,
    )
