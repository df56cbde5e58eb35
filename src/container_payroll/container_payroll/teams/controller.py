from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_iso_date, require_worker_pair
from ..core.constants import UNKNOWN_WORKER_LABEL
from ..core.exceptions import ValidationError
from ..container import ServiceContainer
from .model import Team


def register(app: Flask, container: ServiceContainer) -> None:
    teams = container.team_service
    registry = container.worker_registry

    def _team_view(team: Team, names: dict[str, str]) -> dict:
        view = team.to_record()
        view["workerNames"] = [names.get(w) or UNKNOWN_WORKER_LABEL for w in team.workers]
        return view

    def _names() -> dict[str, str]:
        return {w.id: w.name for w in registry.list_all()}

    @app.route("/api/teams", methods=["GET"], endpoint="list_teams")
    def list_teams():
        date_s = request.args.get("date")
        try:
            items = teams.get_by_date(require_iso_date(date_s, "Date")) if date_s else teams.list_all()
        except ValidationError as e:
            return jsonify(error=str(e)), 400

        if not date_s:
            items = sorted(items, key=lambda t: t.date, reverse=True)
        names = _names()
        return jsonify([_team_view(t, names) for t in items])

    @app.route("/api/teams/available", methods=["GET"], endpoint="available_workers")
    def available_workers():
        try:
            day = require_iso_date(request.args.get("date"), "Date")
        except ValidationError as e:
            return jsonify(error=str(e)), 400
        return jsonify([w.to_record() for w in teams.available_workers(day, registry.list_all())])

    @app.route("/api/teams", methods=["POST"], endpoint="add_team")
    def add_team():
        payload = request.get_json(silent=True) or {}
        try:
            day = require_iso_date(payload.get("date"), "Date")
            worker_a, worker_b = require_worker_pair(payload.get("workers"))
        except ValidationError as e:
            return jsonify(error=str(e)), 400

        assigned = teams.assigned_worker_ids(day)
        if worker_a in assigned or worker_b in assigned:
            return jsonify(error="One of the workers is already in a team on this date"), 409

        team = teams.add(day, worker_a, worker_b)
        if team is None:
            return jsonify(error="Could not create team"), 500
        return jsonify(_team_view(team, _names())), 201

    @app.route("/api/teams/<team_id>", methods=["DELETE"], endpoint="delete_team")
    def delete_team(team_id: str):
        if not teams.delete(team_id):
            return jsonify(error="Could not delete team"), 500
        return jsonify(ok=True)
