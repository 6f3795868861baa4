import json
import logging
from pathlib import Path
from typing import Dict, Optional
from .planner_utils import get_base_dir


class PlannerData:
    def __init__(self, base_dir: Path = None, export_file: str = "planner_export.json"):
        self.base_dir = Path(base_dir) if base_dir is not None else get_base_dir()
        self.export_file = self.base_dir / "data" / export_file

    def export_snapshot(self, snapshot: Dict, notify_callback) -> bool:
        """Сохраняет снимок планировщика в файл"""
        try:
            self.export_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.export_file, "w", encoding="utf-8") as f:
                json.dump(snapshot, f, ensure_ascii=False, indent=4)
            logging.info(f"Planner exported to {self.export_file}")
            notify_callback(f"Saved to {self.export_file.name}")
            return True
        except OSError as e:
            logging.error(f"Error exporting planner to {self.export_file}: {e}")
            notify_callback("Could not save the planner")
            return False

    def import_snapshot(self, notify_callback) -> Optional[Dict]:
        """Читает снимок из файла; при ошибке возвращает None"""
        if not self.export_file.exists():
            logging.warning(f"Export file does not exist: {self.export_file}")
            notify_callback("Nothing to load yet")
            return None
        try:
            with open(self.export_file, "r", encoding="utf-8") as f:
                snapshot = json.load(f)
            logging.info(f"Planner loaded from {self.export_file}")
            return snapshot
        except (OSError, ValueError) as e:
            logging.error(f"Error loading planner from {self.export_file}: {e}")
            notify_callback("Could not read the saved planner")
            return None
