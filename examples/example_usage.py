"""Example: use the service layer directly (no Flask).

Loads roster and logs from the configured sources, then prints the chart and
both drill-downs for the first day and the first student.
"""

import importlib

from config import get_settings_module

from src.attendance_chart.attendance_chart.container import build_container
from src.attendance_chart.attendance_chart.selection.model import SelectionState
from src.attendance_chart.attendance_chart.selection.reducer import select_student


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)
    service = container.dashboard_service

    view = service.reload(SelectionState())
    print(view.state.value, view.error or "")
    for bar in view.chart:
        print(bar.display_date, bar.tooltip)

    if not view.chart:
        return

    state = service.activate_bar(SelectionState(), 0)
    choices = service.student_choices()
    if len(choices) > 1:
        state = select_student(state, int(choices[1].value))

    view = service.build_view(state)
    print(view.selected_date_label, list(view.present_names))
    print(view.selected_student_name, [(h.date, h.status.value) for h in view.history])


if __name__ == "__main__":
    main()
