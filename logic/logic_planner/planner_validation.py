import logging
from typing import Dict, Tuple
from .planner_errors import InvalidSnapshotError
from .planner_utils import PlannerUtils


class PlannerValidation:
    @staticmethod
    def _fail(message: str):
        logging.error(f"Snapshot validation failed: {message}")
        raise InvalidSnapshotError(message)

    @staticmethod
    def _check_key(key, day_count: int, slot_count: int) -> Tuple[int, int]:
        if not isinstance(key, str):
            PlannerValidation._fail(f"Slot key is not a string: {key!r}")
        try:
            day, slot = PlannerUtils.parse_key(key)
        except ValueError as e:
            logging.error(f"Snapshot validation failed: {e}")
            raise InvalidSnapshotError(str(e)) from e
        if day >= day_count or slot >= slot_count:
            PlannerValidation._fail(f"Slot key out of range: {key}")
        return day, slot

    @staticmethod
    def validate_snapshot(snapshot: Dict, day_count: int, slot_count: int) -> Tuple[Dict, Dict, int]:
        """Проверяет снимок целиком и возвращает (задачи, отметки, активный день).

        Ничего не изменяет: при любой ошибке бросает InvalidSnapshotError,
        поэтому частичное применение снимка невозможно.
        """
        if not isinstance(snapshot, dict):
            PlannerValidation._fail(f"Snapshot must be a mapping, got {type(snapshot).__name__}")

        raw_tasks = snapshot.get("tasks", {})
        raw_completions = snapshot.get("completions", {})
        if raw_tasks is None:
            raw_tasks = {}
        if raw_completions is None:
            raw_completions = {}
        if not isinstance(raw_tasks, dict):
            PlannerValidation._fail("'tasks' must be a mapping")
        if not isinstance(raw_completions, dict):
            PlannerValidation._fail("'completions' must be a mapping")

        tasks = {}
        for key, text in raw_tasks.items():
            slot_key = PlannerValidation._check_key(key, day_count, slot_count)
            if not isinstance(text, str):
                PlannerValidation._fail(f"Task text for {key} is not a string")
            tasks[slot_key] = text

        completions = {}
        for key, flag in raw_completions.items():
            slot_key = PlannerValidation._check_key(key, day_count, slot_count)
            if not isinstance(flag, bool):
                PlannerValidation._fail(f"Completion flag for {key} is not a boolean")
            completions[slot_key] = flag

        # старые экспорты писали currentDay
        active_day = snapshot.get("activeDay", snapshot.get("currentDay", 0))
        if isinstance(active_day, bool) or not isinstance(active_day, int):
            PlannerValidation._fail(f"Active day must be an integer, got {active_day!r}")
        if not 0 <= active_day < day_count:
            PlannerValidation._fail(f"Active day out of range: {active_day}")

        logging.info(f"Snapshot validated: {len(tasks)} tasks, {len(completions)} completion flags")
        return tasks, completions, active_day
