"""Home card shown while logged in."""

from __future__ import annotations

import flet as ft

from authflow.app.state import Store
from authflow.app.ui.theme import BG_CARD, MAGENTA_PRIMARY, TEXT_BRIGHT, TEXT_DARK


def build_home_view(store: Store) -> ft.Control:
    async def _on_logout(e) -> None:
        await store.session.logout()

    return ft.Container(
        width=640,
        bgcolor=BG_CARD,
        border_radius=10,
        padding=32,
        margin=ft.margin.only(top=80),
        content=ft.Column(
            [
                ft.Text("Welcome back!", size=32, weight=ft.FontWeight.W_700, color=TEXT_DARK),
                ft.ElevatedButton(
                    "Logout",
                    on_click=_on_logout,
                    bgcolor=MAGENTA_PRIMARY,
                    color=TEXT_BRIGHT,
                ),
            ],
            spacing=20,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
    )
