from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, request, session

from ..common.validators import parse_student_choice, require_non_empty
from ..container import Container
from ..core.enums import LoadState
from ..core.exceptions import FetchFailure, ValidationError
from ..selection.model import SelectionState
from ..selection.reducer import select_date, select_student

logger = logging.getLogger(__name__)

SELECTION_KEY = "selection"


def register(app: Flask, container: Container) -> None:
    service = container.dashboard_service

    def _load_selection() -> SelectionState:
        return SelectionState.from_session(session.get(SELECTION_KEY))

    def _save_selection(state: SelectionState) -> SelectionState:
        session[SELECTION_KEY] = state.to_session()
        return state

    def _view_response(state: SelectionState, view=None):
        view = view or service.build_view(state)
        if view.state == LoadState.FAILED:
            return jsonify({"success": False, "message": view.error, "state": view.state.value}), 503
        return jsonify({"success": True, **view.to_dict()}), 200

    def _fetch_failed(e: FetchFailure):
        return jsonify({"success": False, "message": str(e)}), 503

    def _json_object():
        data = request.get_json(silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValidationError("JSON object required")
        return data

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        """Page load: refetch both sources, then render with the current selection."""
        try:
            state = _load_selection()
            return _view_response(state, service.reload(state))
        except Exception:
            logger.exception("Dashboard load failed")
            return jsonify({"success": False, "message": "Internal error while loading the dashboard"}), 500

    @app.route("/api/view", methods=["GET"], endpoint="dashboard_view")
    def dashboard_view():
        return _view_response(_load_selection())

    @app.route("/api/chart/select", methods=["POST"], endpoint="chart_select")
    def chart_select():
        """Bar activation: {"index": i} from the chart, or {"date": "YYYY-MM-DD"}."""
        state = _load_selection()
        try:
            data = _json_object()
            if "index" in data:
                state = service.activate_bar(state, data["index"])
            else:
                state = select_date(state, require_non_empty(data.get("date"), "date"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchFailure as e:
            return _fetch_failed(e)
        return _view_response(_save_selection(state))

    @app.route("/api/students/select", methods=["POST"], endpoint="student_select")
    def student_select():
        try:
            data = _json_object()
            student_id = parse_student_choice(data.get("student_id"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        state = _save_selection(select_student(_load_selection(), student_id))
        return _view_response(state)

    @app.route("/api/students", methods=["GET"], endpoint="students")
    def students():
        try:
            choices = service.student_choices()
        except FetchFailure as e:
            return _fetch_failed(e)
        selected = _load_selection().selected_student_id
        return jsonify(
            {
                "success": True,
                "selected": "" if selected is None else str(selected),
                "choices": [{"value": c.value, "label": c.label} for c in choices],
            }
        ), 200

    @app.route("/api/chart.csv", methods=["GET"], endpoint="chart_csv")
    def chart_csv():
        try:
            rows = service.export_rows()
        except FetchFailure as e:
            return _fetch_failed(e)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["date", "display_date", "percentage", "present", "roster_size"])
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=daily_attendance.csv"},
        )
