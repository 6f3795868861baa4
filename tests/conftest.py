"""Shared fixtures for planner tests."""

import pytest

from fakes import FakeApp, FakeDayView
from logic.logic_planner.schedule_store import ScheduleStore
from logic.logic_planner.day_view_controller import DayViewController


@pytest.fixture
def store():
    return ScheduleStore()


@pytest.fixture
def view():
    return FakeDayView()


@pytest.fixture
def controller(store, view):
    ctrl = DayViewController(store, view)
    ctrl.start()
    return ctrl


@pytest.fixture
def fake_app():
    return FakeApp()
