import logging
from typing import List, Dict, Tuple
from .planner_errors import OutOfRangeError
from .planner_utils import DAYS, TIME_SLOTS, PlannerUtils
from .planner_validation import PlannerValidation


class ScheduleStore:
    """Хранит текст задач и отметки выполнения для всех дней недели.

    Ключ записи - пара (день, слот). Отсутствие ключа равносильно значению
    по умолчанию: пустой строке для задачи и False для отметки.
    """

    def __init__(self, days: List[str] = None, time_slots: List[Dict] = None):
        self.days = list(days if days is not None else DAYS)
        self.time_slots = list(time_slots if time_slots is not None else TIME_SLOTS)
        if not self.days:
            raise ValueError("At least one day is required")
        PlannerUtils.validate_slots(self.time_slots)
        self.tasks: Dict[Tuple[int, int], str] = {}
        self.completions: Dict[Tuple[int, int], bool] = {}
        self._active_day = 0
        logging.info(f"ScheduleStore initialized: {len(self.days)} days x {len(self.time_slots)} slots")

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def slot_count(self) -> int:
        return len(self.time_slots)

    @property
    def active_day(self) -> int:
        return self._active_day

    @active_day.setter
    def active_day(self, day: int):
        self._check_day(day)
        self._active_day = day

    def _check_day(self, day: int):
        if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day < self.day_count:
            raise OutOfRangeError(day)

    def _check_slot(self, day: int, slot: int):
        self._check_day(day)
        if isinstance(slot, bool) or not isinstance(slot, int) or not 0 <= slot < self.slot_count:
            raise OutOfRangeError(day, slot)

    def day_name(self, day: int) -> str:
        self._check_day(day)
        return self.days[day]

    def set_task(self, day: int, slot: int, text: str):
        """Сохраняет текст задачи; пустая строка тоже сохраняется"""
        self._check_slot(day, slot)
        self.tasks[(day, slot)] = text

    def get_task(self, day: int, slot: int) -> str:
        self._check_slot(day, slot)
        return self.tasks.get((day, slot), "")

    def set_completion(self, day: int, slot: int, is_complete: bool):
        self._check_slot(day, slot)
        self.completions[(day, slot)] = bool(is_complete)

    def get_completion(self, day: int, slot: int) -> bool:
        self._check_slot(day, slot)
        return self.completions.get((day, slot), False)

    def clear_day(self, day: int):
        """Удаляет все записи дня; повторный вызов ничего не делает"""
        self._check_day(day)
        removed = 0
        for slot in range(self.slot_count):
            if self.tasks.pop((day, slot), None) is not None:
                removed += 1
            if self.completions.pop((day, slot), None) is not None:
                removed += 1
        logging.info(f"Cleared day {day} ({self.days[day]}), removed {removed} entries")

    def progress(self, day: int) -> Tuple[int, int]:
        self._check_day(day)
        completed = sum(1 for slot in range(self.slot_count) if self.completions.get((day, slot), False))
        return completed, self.slot_count

    def slot_states(self, day: int) -> List[Dict]:
        """Данные для отрисовки всех слотов дня"""
        self._check_day(day)
        return [
            {
                "time": slot["time"],
                "period": slot["period"],
                "text": self.tasks.get((day, index), ""),
                "is_complete": self.completions.get((day, index), False),
            }
            for index, slot in enumerate(self.time_slots)
        ]

    def snapshot(self) -> Dict:
        return {
            "tasks": {PlannerUtils.make_key(day, slot): text for (day, slot), text in self.tasks.items()},
            "completions": {PlannerUtils.make_key(day, slot): flag for (day, slot), flag in self.completions.items()},
            "activeDay": self._active_day,
        }

    def restore(self, snapshot: Dict):
        """Заменяет всё состояние снимком. Снимок проверяется до изменения данных."""
        tasks, completions, active_day = PlannerValidation.validate_snapshot(
            snapshot, self.day_count, self.slot_count
        )
        self.tasks = tasks
        self.completions = completions
        self._active_day = active_day
        logging.info(f"Restored snapshot, active day: {active_day}")
