from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..container import ServiceContainer


def register(app: Flask, container: ServiceContainer) -> None:
    registry = container.worker_registry

    @app.route("/api/workers", methods=["GET"], endpoint="list_workers")
    def list_workers():
        return jsonify([w.to_record() for w in registry.list_all()])

    @app.route("/api/workers", methods=["POST"], endpoint="add_worker")
    def add_worker():
        payload = request.get_json(silent=True) or {}
        try:
            name = require_non_empty(payload.get("name"), "Name")
        except ValidationError as e:
            return jsonify(error=str(e)), 400

        worker = registry.add(name)
        if worker is None:
            return jsonify(error="Could not add worker"), 500
        return jsonify(worker.to_record()), 201

    @app.route("/api/workers/<worker_id>", methods=["PATCH"], endpoint="update_worker")
    def update_worker(worker_id: str):
        payload = request.get_json(silent=True) or {}
        fields = {}
        try:
            if "name" in payload:
                fields["name"] = require_non_empty(payload.get("name"), "Name")
            if "active" in payload:
                if not isinstance(payload["active"], bool):
                    raise ValidationError("Active must be true or false")
                fields["active"] = payload["active"]
            if not fields:
                raise ValidationError("Nothing to update")
        except ValidationError as e:
            return jsonify(error=str(e)), 400

        if registry.get(worker_id) is None:
            return jsonify(error="Worker not found"), 404
        if not registry.update(worker_id, **fields):
            return jsonify(error="Could not update worker"), 500
        return jsonify(registry.get(worker_id).to_record())

    @app.route("/api/workers/<worker_id>", methods=["DELETE"], endpoint="delete_worker")
    def delete_worker(worker_id: str):
        if not registry.delete(worker_id):
            return jsonify(error="Could not delete worker"), 500
        return jsonify(ok=True)
