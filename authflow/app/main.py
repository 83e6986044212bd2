"""AuthFlow - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from dotenv import load_dotenv

import flet as ft
from authflow.app.state import Store
from authflow.app.ui.layouts.shell import build_shell
from authflow.shared.core.configuration import SystemConfig, ValidationLevel, get_config
from authflow.shared.core.event_bus import EventBus
from authflow.shared.core.service_registry import register_cleanup_handler
from authflow.shared.domain.auth import AuthSessionStore, SessionContext
from authflow.shared.infrastructure.persistence.kv_store import DuckDBKeyValueStore

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
LOGS_DIR = DATA_DIR / "logs"

logger = logging.getLogger(__name__)


def configure_logging(logs_dir: Path = LOGS_DIR) -> None:
    """Configure root logging.

    File handler logs everything at LOG_LEVEL (default DEBUG) to
    data/logs/authflow.log; the console only shows WARNING and above.
    """
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = logs_dir / "authflow.log"

    log_level_str = os.getenv("LOG_LEVEL", "DEBUG").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    file_log_level = log_level_map.get(log_level_str, logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    logging.getLogger("flet_controls").setLevel(logging.WARNING)
    logging.getLogger("flet_transport").setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)

    logger.info(f"Logging configured: file={log_file_path}, console=WARNING+")


def build_session(config: SystemConfig, event_bus: EventBus) -> SessionContext:
    """Open the durable slot and restore the logged-in flag from it."""
    storage_path = Path(config.auth.storage_path)
    if not storage_path.is_absolute():
        storage_path = PROJECT_ROOT / storage_path

    kv_store = DuckDBKeyValueStore(str(storage_path))
    register_cleanup_handler(kv_store.close)

    session = SessionContext(AuthSessionStore(kv_store, config.auth), event_bus)
    session.restore()
    return session


def make_main(config: SystemConfig, event_bus: EventBus, session: SessionContext):
    """Build the per-page entry point over one shared bus and session."""

    async def main(page: ft.Page) -> None:
        """Main Flet application entry point."""
        logger.info("Initializing AuthFlow page...")

        store = Store(event_bus, session)
        await store.app.initialize()

        async def _on_close(e) -> None:
            # The bus and session outlive the page
            await store.app.dispose()

        page.on_close = _on_close

        page.views.append(build_shell(page, store, config))
        page.update()

        logger.info("Application initialized successfully")

    return main


def run() -> None:
    load_dotenv(dotenv_path=PROJECT_ROOT / ".env")
    configure_logging()

    config = get_config(ValidationLevel.LENIENT)
    event_bus = EventBus()
    session = build_session(config, event_bus)
    main = make_main(config, event_bus, session)

    if config.ui.flet_web_mode:
        port = config.ui.flet_port
        logger.info(f"Starting Flet app in WEB mode on port {port}")
        renderer = (
            ft.WebRenderer.AUTO
            if config.ui.flet_web_renderer.lower() == "auto"
            else ft.WebRenderer.CANVAS_KIT
        )
        ft.run(
            main,
            view=ft.AppView.WEB_BROWSER,
            port=port,
            host="127.0.0.1",
            web_renderer=renderer,
        )
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
