import flet as ft
import logging
from typing import List, Dict
from logic.logic_planner.planner_utils import PERIOD_COLORS, PlannerUtils


class PlannerUI:
    """Экран недели: один день на экране, остальные живут в хранилище."""

    def __init__(self, page: ft.Page, manager):
        self.page = page
        self.manager = manager
        self.current_day = None
        self._input_focused = False
        self.day_title = ft.Text("", size=22, weight="bold", text_align=ft.TextAlign.CENTER)
        self.week_input = ft.TextField(
            value="Week 1",
            text_align=ft.TextAlign.CENTER,
            dense=True,
            width=140,
            border=ft.InputBorder.UNDERLINE,
            on_focus=self.on_task_focus,
            on_blur=self.on_week_blur
        )
        self.progress_bar = ft.ProgressBar(value=0, expand=True, color="green", bgcolor="#e0e0e0")
        self.progress_text = ft.Text("0/0", size=14)
        self.day_tabs = [
            ft.TextButton(
                text=name[:3],
                data=index,
                on_click=lambda e: self.manager.controller.navigate(e.control.data)
            )
            for index, name in enumerate(self.manager.store.days)
        ]
        self.slot_rows = []
        self.checkboxes = []
        self.task_inputs = []
        for index, slot in enumerate(self.manager.store.time_slots):
            self._create_time_slot(index, slot)
        self.slots_view = ft.ListView(controls=self.slot_rows, expand=True, spacing=4, padding=10)

    def _create_time_slot(self, slot_index: int, slot: Dict):
        checkbox = ft.Checkbox(value=False, data=slot_index, on_change=self.on_checkbox_change)
        task_input = ft.TextField(
            value="",
            hint_text="Add your task...",
            data=slot_index,
            dense=True,
            expand=True,
            on_change=self.on_task_input,
            on_blur=self.on_task_blur,
            on_focus=self.on_task_focus,
            on_submit=self.on_task_submit
        )
        row = ft.Container(
            content=ft.Row([
                checkbox,
                ft.Text(slot["time"], size=12, width=110),
                task_input
            ], vertical_alignment=ft.CrossAxisAlignment.CENTER),
            padding=ft.padding.symmetric(horizontal=8, vertical=2),
            bgcolor=PERIOD_COLORS.get(slot["period"], "#ffffff"),
            border_radius=8
        )
        self.checkboxes.append(checkbox)
        self.task_inputs.append(task_input)
        self.slot_rows.append(row)

    def _mark_completed(self, slot_index: int, completed: bool):
        self.slot_rows[slot_index].opacity = 0.6 if completed else 1.0
        self.task_inputs[slot_index].text_style = ft.TextStyle(
            decoration=ft.TextDecoration.LINE_THROUGH if completed else ft.TextDecoration.NONE
        )

    # Методы отображения, которые вызывает DayViewController

    def render_day(self, day: int, slots: List[Dict]):
        self.current_day = day
        self.day_title.value = self.manager.store.day_name(day)
        for index, tab in enumerate(self.day_tabs):
            active = index == day
            tab.style = ft.ButtonStyle(
                bgcolor="blue" if active else None,
                color="white" if active else None
            )
        for index, slot in enumerate(slots):
            self.task_inputs[index].value = slot["text"]
            self.checkboxes[index].value = slot["is_complete"]
            self._mark_completed(index, slot["is_complete"])
        self.page.update()
        logging.info(f"Rendered day {day} with {len(slots)} slots")

    def set_progress(self, day: int, completed: int, total: int):
        self.progress_bar.value = PlannerUtils.percentage(completed, total) / 100
        self.progress_text.value = f"{completed}/{total}"
        self.page.update()

    def read_day(self, day: int) -> List[Dict]:
        if day != self.current_day:
            logging.warning(f"Asked to read day {day} while day {self.current_day} is shown")
            return []
        return [
            {"text": task_input.value or "", "is_complete": bool(checkbox.value)}
            for task_input, checkbox in zip(self.task_inputs, self.checkboxes)
        ]

    # Обработчики событий

    def on_checkbox_change(self, e):
        slot_index = e.control.data
        checked = bool(e.control.value)
        self._mark_completed(slot_index, checked)
        self.manager.controller.handle_checkbox_toggle(self.current_day, slot_index, checked)

    def on_task_input(self, e):
        self.manager.controller.handle_task_text_change(self.current_day, e.control.data, e.control.value or "")

    def on_task_focus(self, e):
        self._input_focused = True

    def on_task_blur(self, e):
        self._input_focused = False
        self.on_task_input(e)

    def on_week_blur(self, e):
        self._input_focused = False

    def on_task_submit(self, e):
        """Enter переводит фокус на следующий слот"""
        slot_index = e.control.data
        if slot_index < len(self.task_inputs) - 1:
            self.task_inputs[slot_index + 1].focus()

    def on_keyboard(self, e: ft.KeyboardEvent):
        # стрелки листают дни, только если поле ввода не в фокусе
        if self._input_focused:
            return
        if e.key == "Arrow Left":
            self.manager.controller.previous_day()
        elif e.key == "Arrow Right":
            self.manager.controller.next_day()

    def notify(self, message: str):
        snack_bar = ft.SnackBar(ft.Text(message), duration=3000)
        self.page.overlay.append(snack_bar)
        snack_bar.open = True
        self.page.update()

    def confirm_clear(self, day_name: str, on_confirm):
        """Диалог подтверждения очистки дня"""
        def confirm(e):
            dialog.open = False
            on_confirm()
            logging.info(f"Clear confirmed for {day_name}")

        def cancel(e):
            dialog.open = False
            self.page.update()
            logging.info("Clear day cancelled")

        dialog = ft.AlertDialog(
            title=ft.Text("Clear this day?"),
            content=ft.Text(f"All tasks and checkmarks for {day_name} will be removed"),
            actions=[
                ft.TextButton("Clear", on_click=confirm),
                ft.TextButton("Cancel", on_click=cancel)
            ],
            actions_alignment=ft.MainAxisAlignment.END,
            modal=True
        )
        self.page.overlay.append(dialog)
        dialog.open = True
        self.page.update()

    def on_clear_click(self, e):
        self.manager.clear_day_requested(self.confirm_clear)

    def on_export_click(self, e):
        self.manager.save_planner(self.notify)

    def on_import_click(self, e):
        self.manager.load_planner(self.notify)

    def build(self):
        header = ft.Row([
            ft.IconButton(
                icon=ft.Icons.CHEVRON_LEFT,
                on_click=lambda e: self.manager.controller.navigate("previous")
            ),
            ft.Container(
                content=ft.Column(
                    [self.week_input, self.day_title],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    spacing=2
                ),
                expand=True,
                alignment=ft.alignment.center
            ),
            ft.IconButton(
                icon=ft.Icons.CHEVRON_RIGHT,
                on_click=lambda e: self.manager.controller.navigate("next")
            )
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)

        actions = ft.Row([
            ft.ElevatedButton(
                text="Clear Day",
                icon=ft.Icons.DELETE_OUTLINE,
                on_click=self.on_clear_click
            ),
            ft.ElevatedButton(
                text="Export",
                icon=ft.Icons.SAVE,
                on_click=self.on_export_click
            ),
            ft.ElevatedButton(
                text="Import",
                icon=ft.Icons.UPLOAD_FILE,
                on_click=self.on_import_click
            )
        ], alignment=ft.MainAxisAlignment.CENTER, wrap=True)

        return ft.Column(
            controls=[
                ft.Container(content=header, padding=ft.padding.only(top=30)),
                ft.Row(self.day_tabs, alignment=ft.MainAxisAlignment.CENTER, wrap=True),
                ft.Container(
                    content=ft.Row([self.progress_bar, self.progress_text]),
                    padding=ft.padding.symmetric(horizontal=20)
                ),
                self.slots_view,
                actions
            ],
            expand=True
        )
