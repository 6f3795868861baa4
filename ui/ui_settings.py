import flet as ft
import logging


class SettingsUI:
    def __init__(self, page: ft.Page, manager):
        self.page = page
        self.manager = manager

    def on_confirm_clear_change(self, e):
        self.manager.set_confirm_clear_day(e.control.value)

    def build(self):
        """Создаём интерфейс настроек"""
        theme_switch = ft.Switch(
            label="Dark theme",
            value=self.manager.app.settings.get("theme", "light") == "dark",
            on_change=lambda e: self.manager.toggle_theme(self.page)
        )
        confirm_clear_switch = ft.Switch(
            label="Ask before clearing a day",
            value=self.manager.app.settings.get("confirm_clear_day", True),
            on_change=self.on_confirm_clear_change
        )
        logging.info("Settings view built")

        return ft.Container(
            padding=ft.padding.symmetric(horizontal=20, vertical=20),
            content=ft.Column([
                ft.Card(
                    content=ft.Container(
                        content=ft.Column([
                            ft.Text("Theme", weight="bold", size=16),
                            theme_switch
                        ], spacing=10),
                        padding=10
                    )
                ),
                ft.Divider(),
                ft.Card(
                    content=ft.Container(
                        content=ft.Column([
                            ft.Text("Planner", weight="bold", size=16),
                            confirm_clear_switch
                        ], spacing=10),
                        padding=10
                    )
                )
            ], spacing=15, alignment=ft.MainAxisAlignment.CENTER)
        )
