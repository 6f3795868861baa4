"""Tests for ui/ui_planner.py with a mocked flet page."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from fakes import FakeApp
from logic.logic_planner.planner_data import PlannerData
from logic.logic_planner.planner_manager import PlannerManager
from logic.logic_planner.schedule_store import ScheduleStore
from ui.ui_planner import PlannerUI


@pytest.fixture
def page():
    return MagicMock()


@pytest.fixture
def ui(page, tmp_path):
    manager = PlannerManager(FakeApp(), store=ScheduleStore(), data=PlannerData(base_dir=tmp_path))
    planner_ui = PlannerUI(page, manager)
    manager.attach_view(planner_ui)
    return planner_ui


def event(control):
    return SimpleNamespace(control=control)


def test_initial_render(ui):
    assert ui.current_day == 0
    assert ui.day_title.value == "Monday"
    assert len(ui.task_inputs) == 35
    assert ui.progress_text.value == "0/35"


def test_typing_writes_through(ui):
    field = ui.task_inputs[0]
    field.value = "Workout"
    ui.on_task_input(event(field))
    assert ui.manager.store.get_task(0, 0) == "Workout"


def test_checkbox_updates_progress_and_style(ui):
    checkbox = ui.checkboxes[2]
    checkbox.value = True
    ui.on_checkbox_change(event(checkbox))
    assert ui.manager.store.get_completion(0, 2) is True
    assert ui.progress_text.value == "1/35"
    assert ui.progress_bar.value == pytest.approx(1 / 35)
    assert ui.slot_rows[2].opacity == 0.6


def test_navigation_restores_each_day(ui):
    ui.task_inputs[0].value = "Workout"
    ui.checkboxes[0].value = True
    ui.manager.controller.next_day()

    assert ui.day_title.value == "Tuesday"
    assert ui.task_inputs[0].value == ""
    assert ui.checkboxes[0].value is False

    ui.manager.controller.previous_day()
    assert ui.task_inputs[0].value == "Workout"
    assert ui.checkboxes[0].value is True
    assert ui.progress_text.value == "1/35"


def test_read_day_for_other_day_is_empty(ui):
    assert ui.read_day(4) == []


def test_arrow_keys_ignored_while_typing(ui):
    ui.on_task_focus(event(ui.task_inputs[0]))
    ui.on_keyboard(SimpleNamespace(key="Arrow Right"))
    assert ui.manager.store.active_day == 0

    ui.on_task_blur(event(ui.task_inputs[0]))
    ui.on_keyboard(SimpleNamespace(key="Arrow Right"))
    assert ui.manager.store.active_day == 1
    ui.on_keyboard(SimpleNamespace(key="Arrow Left"))
    ui.on_keyboard(SimpleNamespace(key="Arrow Left"))
    assert ui.manager.store.active_day == 6


def test_confirm_clear_dialog(ui, page):
    ui.manager.controller.handle_task_text_change(0, 0, "Workout")
    ui.manager.clear_day_requested(ui.confirm_clear)

    dialog = page.overlay.append.call_args[0][0]
    assert dialog.open is True
    assert dialog.modal is True
    assert "Monday" in dialog.content.value
    assert ui.manager.store.get_task(0, 0) == "Workout"


def last_snack_text(page):
    snack_bar = page.overlay.append.call_args[0][0]
    return snack_bar.content.value


def test_enter_moves_focus_to_next_slot(ui, monkeypatch):
    next_focus = MagicMock()
    monkeypatch.setattr(ui.task_inputs[4], "focus", next_focus)
    ui.on_task_submit(event(ui.task_inputs[3]))
    next_focus.assert_called_once()


def test_enter_on_last_slot_stays(ui, monkeypatch):
    for field in ui.task_inputs:
        monkeypatch.setattr(field, "focus", MagicMock())
    ui.on_task_submit(event(ui.task_inputs[-1]))
    for field in ui.task_inputs:
        field.focus.assert_not_called()


def test_export_and_import_buttons(ui, page, tmp_path):
    ui.task_inputs[0].value = "Workout"
    ui.on_export_click(None)
    assert last_snack_text(page) == "Saved to planner_export.json"
    assert (tmp_path / "data" / "planner_export.json").exists()

    ui.manager.controller.clear_active_day()
    assert ui.task_inputs[0].value == ""

    ui.on_import_click(None)
    assert last_snack_text(page) == "Planner loaded"
    assert ui.task_inputs[0].value == "Workout"


def test_import_without_file_notifies(ui, page):
    ui.on_import_click(None)
    assert last_snack_text(page) == "Nothing to load yet"


def test_week_label_blocks_arrow_keys(ui):
    ui.on_task_focus(event(ui.week_input))
    ui.on_keyboard(SimpleNamespace(key="Arrow Right"))
    assert ui.manager.store.active_day == 0
    ui.on_week_blur(event(ui.week_input))
    ui.on_keyboard(SimpleNamespace(key="Arrow Right"))
    assert ui.manager.store.active_day == 1


def test_build_has_week_label(ui):
    layout = ui.build()
    header = layout.controls[0].content
    title_column = header.controls[1].content
    assert title_column.controls[0] is ui.week_input
    assert ui.week_input.value == "Week 1"
