import logging
from typing import Dict
from .schedule_store import ScheduleStore
from .day_view_controller import DayViewController
from .planner_data import PlannerData
from .planner_errors import InvalidSnapshotError


class PlannerManager:
    def __init__(self, app, store: ScheduleStore = None, data: PlannerData = None):
        self.app = app
        self.store = store if store is not None else ScheduleStore()
        self.data = data if data is not None else PlannerData(
            export_file=app.settings.get("export_file", "planner_export.json")
        )
        self.controller = None
        logging.info("PlannerManager initialized")

    def attach_view(self, view) -> DayViewController:
        """Связывает хранилище с экраном и показывает активный день"""
        self.controller = DayViewController(self.store, view)
        self.controller.start()
        return self.controller

    def save_planner(self, notify_callback) -> bool:
        """Экспорт всей недели в файл"""
        snapshot = self.controller.export_data()
        return self.data.export_snapshot(snapshot, notify_callback)

    def load_planner(self, notify_callback) -> bool:
        """Импорт недели из файла. Некорректный файл не меняет текущие данные."""
        snapshot = self.data.import_snapshot(notify_callback)
        if snapshot is None:
            return False
        return self.apply_snapshot(snapshot, notify_callback)

    def apply_snapshot(self, snapshot: Dict, notify_callback) -> bool:
        try:
            self.controller.import_data(snapshot)
        except InvalidSnapshotError as e:
            logging.error(f"Rejected planner snapshot: {e}")
            notify_callback(f"Saved planner is invalid: {e}")
            return False
        notify_callback("Planner loaded")
        return True

    def clear_day_requested(self, confirm_callback):
        """Очистка активного дня, при необходимости с подтверждением"""
        if self.app.settings.get("confirm_clear_day", True):
            day_name = self.store.day_name(self.controller.active_day)
            confirm_callback(day_name, self.controller.clear_active_day)
        else:
            self.controller.clear_active_day()
