import json
import logging
from pathlib import Path
from logic.logic_planner.planner_utils import get_base_dir

DEFAULT_SETTINGS = {
    "theme": "light",
    "confirm_clear_day": True,
    "export_file": "planner_export.json",
}


class SettingsData:
    def __init__(self, base_dir: Path = None):
        base_dir = Path(base_dir) if base_dir is not None else get_base_dir()
        self.settings_file = base_dir / "data" / "settings.json"

    def load_settings(self, app):
        """Загрузка настроек из файла"""
        if self.settings_file.exists():
            try:
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    app.settings = json.load(f)
            except (OSError, ValueError) as e:
                logging.error(f"Error loading settings from {self.settings_file}: {e}")
        if not isinstance(app.settings, dict):
            logging.error(f"Settings file {self.settings_file} does not hold an object, using defaults")
            app.settings = {}
        for key, value in DEFAULT_SETTINGS.items():
            app.settings.setdefault(key, value)

    def save_settings(self, app):
        """Сохранение настроек в файл"""
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            logging.info(f"Saving settings to: {self.settings_file}")
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(app.settings, f, ensure_ascii=False, indent=4)
        except OSError as e:
            logging.error(f"Error saving settings to {self.settings_file}: {e}")
