import logging
from typing import Dict
from .schedule_store import ScheduleStore


class DayViewController:
    """Переключает дни между хранилищем и экраном редактирования.

    view - объект отображения с методами:
      render_day(day, slots)                - перерисовать день по данным слотов
      set_progress(day, completed, total)   - показать прогресс дня
      read_day(day) -> [{"text", "is_complete"}, ...] - текущие значения полей
    """

    def __init__(self, store: ScheduleStore, view):
        self.store = store
        self.view = view
        self._shown = False
        logging.info("DayViewController initialized")

    @property
    def active_day(self) -> int:
        return self.store.active_day

    def start(self):
        """Первая отрисовка активного дня"""
        self._shown = False
        self.show_day(self.store.active_day)

    def _flush(self):
        """Переносит значения с экрана в хранилище для текущего дня"""
        day = self.store.active_day
        values = self.view.read_day(day)
        for slot, value in enumerate(values[:self.store.slot_count]):
            self.store.set_task(day, slot, value.get("text", ""))
            self.store.set_completion(day, slot, value.get("is_complete", False))
        logging.info(f"Flushed {len(values)} slots of day {day}")

    def _refresh(self):
        day = self.store.active_day
        self.view.render_day(day, self.store.slot_states(day))
        self._publish_progress()

    def _publish_progress(self):
        day = self.store.active_day
        completed, total = self.store.progress(day)
        self.view.set_progress(day, completed, total)

    def show_day(self, target_day: int):
        if isinstance(target_day, bool) or not isinstance(target_day, int) \
                or not 0 <= target_day < self.store.day_count:
            logging.warning(f"Ignoring navigation to invalid day: {target_day!r}")
            return

        if self._shown:
            self._flush()

        self.store.active_day = target_day
        self._shown = True
        self._refresh()
        logging.info(f"Showing day {target_day} ({self.store.day_name(target_day)})")

    def next_day(self):
        self.show_day((self.store.active_day + 1) % self.store.day_count)

    def previous_day(self):
        self.show_day((self.store.active_day - 1) % self.store.day_count)

    def navigate(self, target):
        """Обрабатывает навигацию: "next", "previous" или номер дня"""
        if target == "next":
            self.next_day()
        elif target in ("previous", "prev"):
            self.previous_day()
        else:
            self.show_day(target)

    def handle_checkbox_toggle(self, day: int, slot: int, checked: bool):
        self.store.set_completion(day, slot, checked)
        if day == self.store.active_day:
            self._publish_progress()

    def handle_task_text_change(self, day: int, slot: int, text: str):
        self.store.set_task(day, slot, text)

    def clear_active_day(self):
        self.store.clear_day(self.store.active_day)
        self._refresh()

    def export_data(self) -> Dict:
        """Снимок всего состояния вместе с несохранёнными полями экрана"""
        if self._shown:
            self._flush()
        return self.store.snapshot()

    def import_data(self, snapshot: Dict):
        """Загружает снимок и показывает его активный день.

        Экран не сбрасывается в хранилище: он показывает старые данные.
        """
        self.store.restore(snapshot)
        self._shown = False
        self.show_day(self.store.active_day)
