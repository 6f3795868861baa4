import logging
from pathlib import Path
from platform import system
from typing import List, Dict, Tuple
from plyer import storagepath

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

PERIODS = ("morning", "afternoon", "evening")

TIME_SLOTS = [
    {"time": "5:00-5:30 AM", "period": "morning"},
    {"time": "5:30-6:00 AM", "period": "morning"},
    {"time": "6:00-6:30 AM", "period": "morning"},
    {"time": "6:30-7:00 AM", "period": "morning"},
    {"time": "7:00-7:30 AM", "period": "morning"},
    {"time": "7:30-8:00 AM", "period": "morning"},
    {"time": "8:00-8:30 AM", "period": "morning"},
    {"time": "8:30-9:00 AM", "period": "morning"},
    {"time": "9:00-9:30 AM", "period": "morning"},
    {"time": "9:30-10:00 AM", "period": "morning"},
    {"time": "10:00-10:30 AM", "period": "morning"},
    {"time": "10:30-11:00 AM", "period": "morning"},
    {"time": "11:00-11:30 AM", "period": "morning"},
    {"time": "11:30-12:00 PM", "period": "morning"},
    {"time": "12:00-12:30 PM", "period": "afternoon"},
    {"time": "12:30-1:00 PM", "period": "afternoon"},
    {"time": "1:00-1:30 PM", "period": "afternoon"},
    {"time": "1:30-2:00 PM", "period": "afternoon"},
    {"time": "2:00-2:30 PM", "period": "afternoon"},
    {"time": "2:30-3:00 PM", "period": "afternoon"},
    {"time": "3:00-3:30 PM", "period": "afternoon"},
    {"time": "3:30-4:00 PM", "period": "afternoon"},
    {"time": "4:00-4:30 PM", "period": "afternoon"},
    {"time": "4:30-5:00 PM", "period": "afternoon"},
    {"time": "5:00-5:30 PM", "period": "afternoon"},
    {"time": "5:30-6:00 PM", "period": "afternoon"},
    {"time": "6:00-6:30 PM", "period": "evening"},
    {"time": "6:30-7:00 PM", "period": "evening"},
    {"time": "7:00-7:30 PM", "period": "evening"},
    {"time": "7:30-8:00 PM", "period": "evening"},
    {"time": "8:00-8:30 PM", "period": "evening"},
    {"time": "8:30-9:00 PM", "period": "evening"},
    {"time": "9:00-9:30 PM", "period": "evening"},
    {"time": "9:30-10:00 PM", "period": "evening"},
    {"time": "10:00-10:30 PM", "period": "evening"},
]

PERIOD_COLORS = {
    "morning": "#fff8e1",
    "afternoon": "#e3f2fd",
    "evening": "#ede7f6",
}


def get_base_dir() -> Path:
    """Возвращает корневую папку для данных приложения."""
    if system() == "Android":
        return Path(storagepath.get_files_dir())
    return Path(__file__).parent.parent.parent


class PlannerUtils:
    @staticmethod
    def make_key(day: int, slot: int) -> str:
        """Строит ключ слота в формате day-<день>-slot-<слот>"""
        return f"day-{day}-slot-{slot}"

    @staticmethod
    def parse_key(key: str) -> Tuple[int, int]:
        """Разбирает ключ слота обратно в пару (день, слот)"""
        parts = key.split("-")
        if len(parts) != 4 or parts[0] != "day" or parts[2] != "slot":
            raise ValueError(f"Malformed slot key: {key!r}")
        if not parts[1].isdigit() or not parts[3].isdigit():
            raise ValueError(f"Malformed slot key: {key!r}")
        day, slot = int(parts[1]), int(parts[3])
        # ключ должен совпадать с каноническим: без ведущих нулей и не-ASCII цифр
        if PlannerUtils.make_key(day, slot) != key:
            raise ValueError(f"Malformed slot key: {key!r}")
        return day, slot

    @staticmethod
    def validate_slots(time_slots: List[Dict]) -> None:
        for index, slot in enumerate(time_slots):
            if not slot.get("time"):
                raise ValueError(f"Time slot {index} has no time label")
            if slot.get("period") not in PERIODS:
                raise ValueError(f"Time slot {index} has unknown period: {slot.get('period')!r}")
        logging.info(f"Validated {len(time_slots)} time slots")

    @staticmethod
    def percentage(completed: int, total: int) -> float:
        return (completed / total) * 100 if total > 0 else 0.0
