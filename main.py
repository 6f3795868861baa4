import flet as ft
import logging
from logging.handlers import RotatingFileHandler
from logic.logic_planner.planner_utils import get_base_dir
from logic.logic_planner.planner_manager import PlannerManager
from logic.logic_settings.settings_data import SettingsData
from logic.logic_settings.settings_manager import SettingsManager
from ui.ui_planner import PlannerUI
from ui.ui_settings import SettingsUI


class App:
    def __init__(self, settings_data: SettingsData = None):
        self.settings = {}
        self.settings_data = settings_data if settings_data is not None else SettingsData()
        self.settings_data.load_settings(self)


def setup_logging():
    """Настраивает логирование с ротацией логов в папке data/log."""
    log_dir = get_base_dir() / "data" / "log"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "app.log",
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    logging.getLogger().setLevel(logging.INFO)
    logging.getLogger().addHandler(handler)
    logging.info(f"Logging initialized, logs will be saved to {log_dir / 'app.log'}")


def main(page: ft.Page):
    """Основная функция приложения."""
    setup_logging()
    logging.info("Starting Weekly Planner")

    app = App()
    page.title = "Weekly Planner"
    page.theme_mode = ft.ThemeMode.DARK if app.settings.get("theme") == "dark" else ft.ThemeMode.LIGHT

    planner_manager = PlannerManager(app)
    settings_manager = SettingsManager(app, app.settings_data)

    planner_ui = PlannerUI(page, planner_manager)
    settings_ui = SettingsUI(page, settings_manager)
    page.on_keyboard_event = planner_ui.on_keyboard

    content_container = ft.Container(expand=True)
    planner_view = planner_ui.build()

    def switch_content(e):
        selected_index = e.control.selected_index
        if selected_index == 0:
            content_container.content = planner_view
        elif selected_index == 1:
            content_container.content = settings_ui.build()
        page.update()
        logging.info(f"Switched to tab index: {selected_index}")

    nav_bar = ft.NavigationBar(
        destinations=[
            ft.NavigationBarDestination(
                icon=ft.Icons.CALENDAR_VIEW_WEEK,
                label="Planner"
            ),
            ft.NavigationBarDestination(
                icon=ft.Icons.SETTINGS,
                label="Settings"
            ),
        ],
        selected_index=0,
        on_change=switch_content
    )

    content_container.content = planner_view
    page.views.clear()
    page.views.append(
        ft.View(
            "/main",
            [
                content_container,
                nav_bar
            ],
            vertical_alignment=ft.MainAxisAlignment.SPACE_BETWEEN
        )
    )
    page.update()

    planner_manager.attach_view(planner_ui)
    logging.info("Main view with navigation bar displayed")


def run():
    ft.app(target=main)


if __name__ == "__main__":
    run()
