from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_iso_date, require_non_empty, require_positive_int
from ..core.constants import UNKNOWN_TEAM_LABEL, UNKNOWN_WORKER_LABEL
from ..core.exceptions import ValidationError
from ..container import ServiceContainer
from .model import Container


def register(app: Flask, container: ServiceContainer) -> None:
    ledger = container.container_ledger
    teams = container.team_service
    registry = container.worker_registry

    def _views(items: list[Container]) -> list[dict]:
        team_map = {t.id: t for t in teams.list_all()}
        names = {w.id: w.name for w in registry.list_all()}
        out = []
        for c in items:
            view = c.to_record()
            team = team_map.get(c.team_id)
            view["team"] = (
                ", ".join(names.get(w) or UNKNOWN_WORKER_LABEL for w in team.workers) if team else UNKNOWN_TEAM_LABEL
            )
            out.append(view)
        return out

    @app.route("/api/containers", methods=["GET"], endpoint="container_history")
    def container_history():
        worker_id = request.args.get("worker_id") or None
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        try:
            start = require_iso_date(start_s, "Start date") if start_s else None
            end = require_iso_date(end_s, "End date") if end_s else None
        except ValidationError as e:
            return jsonify(error=str(e)), 400

        return jsonify(_views(ledger.history(worker_id=worker_id, start=start, end=end)))

    @app.route("/api/containers", methods=["POST"], endpoint="add_container")
    def add_container():
        payload = request.get_json(silent=True) or {}
        try:
            day = require_iso_date(payload.get("date"), "Date")
            team_id = require_non_empty(payload.get("teamId"), "Team")
            package_count = require_positive_int(payload.get("packageCount"), "Package count")

            team = teams.get(team_id)
            if team is None:
                raise ValidationError("Team not found")
            if team.date != day:
                raise ValidationError("Team is not scheduled on this date")
        except ValidationError as e:
            return jsonify(error=str(e)), 400

        recorded = ledger.add(day, team_id, package_count)
        if recorded is None:
            return jsonify(error="Could not record container"), 500
        return jsonify(_views([recorded])[0]), 201
