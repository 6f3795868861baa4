import flet as ft
import logging
from logic.logic_settings.settings_data import SettingsData


class SettingsManager:
    def __init__(self, app, data: SettingsData = None):
        self.data = data if data is not None else SettingsData()
        self.app = app
        logging.info("SettingsManager initialized")

    def toggle_theme(self, page):
        """Переключает тему приложения между светлой и тёмной."""
        current_theme = self.app.settings.get("theme", "light")
        new_theme = "dark" if current_theme == "light" else "light"
        self.app.settings["theme"] = new_theme
        self.data.save_settings(self.app)
        page.theme_mode = ft.ThemeMode.DARK if new_theme == "dark" else ft.ThemeMode.LIGHT
        page.update()
        logging.info(f"Theme switched to {new_theme}")

    def set_confirm_clear_day(self, enabled: bool):
        self.app.settings["confirm_clear_day"] = bool(enabled)
        self.data.save_settings(self.app)
        logging.info(f"Clear day confirmation {'enabled' if enabled else 'disabled'}")
