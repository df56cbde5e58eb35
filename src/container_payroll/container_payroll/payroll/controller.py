from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.money import to_json_number
from ..common.validators import require_iso_date, require_positive_int
from ..core.exceptions import ValidationError
from ..container import ServiceContainer


def register(app: Flask, container: ServiceContainer) -> None:
    calculator = container.calculator

    @app.route("/api/payment", methods=["GET"], endpoint="payment_quote")
    def payment_quote():
        try:
            package_count = require_positive_int(request.args.get("packageCount"), "Package count")
        except ValidationError as e:
            return jsonify(error=str(e)), 400

        payment = calculator.payment(package_count)
        return jsonify(
            packageCount=package_count,
            payment=to_json_number(payment),
            paymentPerWorker=to_json_number(calculator.payment_per_worker(payment)),
        )

    @app.route("/api/reports/payroll", methods=["GET"], endpoint="payroll_report")
    def payroll_report():
        try:
            start = require_iso_date(request.args.get("start"), "Start date")
            end = require_iso_date(request.args.get("end"), "End date")
            if start > end:
                raise ValidationError("Start date must not be after end date")
        except ValidationError as e:
            return jsonify(error=str(e)), 400

        report = container.payroll_report_service.build_worker_report(
            start=start,
            end=end,
            worker_id=request.args.get("worker_id") or None,
        )
        return jsonify(rows=report.rows, summary=report.summary)
