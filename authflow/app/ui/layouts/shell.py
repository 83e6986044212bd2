from __future__ import annotations

import datetime
import logging
from typing import Any, Dict, Optional

import flet as ft

from authflow.app.state import Store
from authflow.app.ui.components.header import build_header
from authflow.app.ui.theme import BG_PAGE, MAGENTA_PRIMARY, TEXT_MUTED, get_log_color
from authflow.app.ui.views.home_view import build_home_view
from authflow.app.ui.views.login_view import LoginView
from authflow.shared.core.configuration import SystemConfig
from authflow.shared.core.service_registry import register_cleanup_handler

logger = logging.getLogger(__name__)

# Most recent log entries shown under the card
LOG_STRIP_ENTRIES = 5


def apply_shell_theme(page: ft.Page, config: SystemConfig) -> None:
    page.title = config.ui.window_title
    page.theme = ft.Theme(color_scheme_seed=MAGENTA_PRIMARY, use_material3=True)
    page.theme_mode = ft.ThemeMode.DARK if config.ui.theme_mode == "dark" else ft.ThemeMode.LIGHT
    page.bgcolor = BG_PAGE
    page.padding = 0


def build_log_row(entry: Dict[str, Any]) -> ft.Row:
    """Render one session log entry as a colored row."""
    level = entry.get("level", "info")
    ts = entry.get("ts", 0)
    time_str = datetime.datetime.fromtimestamp(ts).strftime("%H:%M:%S") if ts else ""
    color = get_log_color(level)
    return ft.Row(
        [
            ft.Text(level.upper(), size=11, color=color, width=60),
            ft.Text(time_str, size=11, color=TEXT_MUTED, width=70),
            ft.Text(entry.get("message", ""), size=12, color=color, expand=True),
        ],
        spacing=8,
    )


def build_shell(page: ft.Page, store: Store, config: SystemConfig) -> ft.View:
    """Build the root view: header plus either the login card or the home card."""
    apply_shell_theme(page, config)

    # The mounted login form, if the login card is showing
    login_view: list[Optional[LoginView]] = [None]

    def _dispose_login() -> None:
        if login_view[0] is not None:
            login_view[0].dispose()
            login_view[0] = None

    register_cleanup_handler(_dispose_login)

    content_container = ft.Container(alignment=ft.Alignment(0, -1))
    status_text = ft.Text(store.app.status_text.value, color=TEXT_MUTED, size=12)
    log_column = ft.Column(spacing=2)

    def _sync_content(e=None) -> None:
        if store.app.is_logged_in.value:
            _dispose_login()
            content_container.content = build_home_view(store)
        elif login_view[0] is None:
            login_view[0] = LoginView(page, store, config.form)
            content_container.content = login_view[0].build_view()
        _update()

    def _sync_status(e=None) -> None:
        status_text.value = store.app.status_text.value
        _update()

    def _sync_logs(e=None) -> None:
        entries = list(store.app.logs.value)[-LOG_STRIP_ENTRIES:]
        log_column.controls = [build_log_row(entry) for entry in reversed(entries)]
        _update()

    def _update() -> None:
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    # --- Listener Bindings ---
    store.app.is_logged_in.listen(_sync_content)
    store.app.status_text.listen(_sync_status)
    store.app.logs.listen(_sync_logs)

    # Initial Sync
    _sync_content()
    _sync_logs()

    return ft.View(
        route="/",
        controls=[
            build_header(page, store),
            ft.Container(expand=True, content=content_container, alignment=ft.Alignment(0, -1)),
            ft.Container(
                padding=ft.padding.only(left=16, bottom=8),
                content=ft.Column([status_text, log_column], spacing=4),
            ),
        ],
        bgcolor=BG_PAGE,
        padding=0,
    )
