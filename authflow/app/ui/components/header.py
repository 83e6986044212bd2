"""Top bar with the page title and, once logged in, navigation and logout."""

from __future__ import annotations

import flet as ft

from authflow.app.state import Store
from authflow.app.ui.theme import GOLD_PRIMARY, MAGENTA_DARK, MAGENTA_PRIMARY, TEXT_BRIGHT


def build_header(page: ft.Page, store: Store) -> ft.Container:
    nav = ft.Row(
        [
            ft.TextButton("Users", style=ft.ButtonStyle(color=GOLD_PRIMARY)),
            ft.TextButton("Admin", style=ft.ButtonStyle(color=GOLD_PRIMARY)),
            ft.ElevatedButton(
                "Logout",
                on_click=_on_logout(store),
                bgcolor=MAGENTA_DARK,
                color=TEXT_BRIGHT,
            ),
        ],
        spacing=12,
        visible=store.app.is_logged_in.value,
    )

    def _sync_nav(e=None) -> None:
        nav.visible = store.app.is_logged_in.value
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    store.app.is_logged_in.listen(_sync_nav)

    return ft.Container(
        height=80,
        bgcolor=MAGENTA_PRIMARY,
        padding=ft.padding.only(left=40, right=40),
        content=ft.Row(
            [
                ft.Text("A Typical Page", size=24, weight=ft.FontWeight.W_700, color=TEXT_BRIGHT),
                nav,
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        ),
    )


def _on_logout(store: Store):
    async def handler(e) -> None:
        await store.session.logout()

    return handler
