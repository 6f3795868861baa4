class OutOfRangeError(IndexError):
    """Индекс дня или слота вне фиксированной сетки"""

    def __init__(self, day: int, slot: int = None):
        self.day = day
        self.slot = slot
        if slot is None:
            message = f"Day index out of range: {day}"
        else:
            message = f"Slot out of range: day={day}, slot={slot}"
        super().__init__(message)


class InvalidSnapshotError(ValueError):
    """Снимок состояния не прошёл проверку при импорте"""
