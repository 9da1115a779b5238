from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from ..core.logging_config import get_logger
from ..container import Container

logger = get_logger("payroll.controller")


def register(app: Flask, container: Container) -> None:
    def _parse_optional_date(value):
        return parse_iso_date(value) if value else None

    @app.route("/api/payroll/periods", methods=["GET"], endpoint="payroll_periods")
    def payroll_periods():
        try:
            periods = container.payroll_service.list_periods()
            return jsonify([p.to_dict() for p in periods]), 200
        except Exception:
            logger.exception("Error fetching payroll periods")
            return jsonify({"success": False, "message": "Failed to fetch payroll periods"}), 500

    @app.route("/api/payroll/periods", methods=["POST"], endpoint="payroll_period_create")
    def payroll_period_create():
        data = request.get_json(silent=True) or {}
        try:
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")
            try:
                start_date = parse_iso_date(data.get("start_date") or "")
                end_date = parse_iso_date(data.get("end_date") or "")
                pay_date = _parse_optional_date(data.get("pay_date"))
            except ValueError:
                raise ValidationError("Dates must use the YYYY-MM-DD format") from None

            period = container.payroll_service.create_period(
                period_name=data.get("period_name") or "",
                start_date=start_date,
                end_date=end_date,
                pay_date=pay_date,
            )
            return jsonify({"message": "Payroll period created successfully", "period": period.to_dict()}), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Error creating payroll period")
            return jsonify({"success": False, "message": "Failed to create payroll period"}), 500

    @app.route("/api/payroll/<int:period_id>", methods=["GET"], endpoint="payroll_run")
    def payroll_run(period_id: int):
        try:
            run = container.payroll_service.run_period(period_id)
            return jsonify(run.to_dict()), 200
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Error computing payroll for period %s", period_id)
            return jsonify({"success": False, "message": "Failed to compute payroll"}), 500

    @app.route(
        "/api/payroll/generate-payslip/<int:user_id>/<int:period_id>",
        methods=["POST"],
        endpoint="payroll_generate_payslip",
    )
    def payroll_generate_payslip(user_id: int, period_id: int):
        try:
            payslip = container.payroll_service.generate_payslip(user_id=user_id, period_id=period_id)
            return jsonify(payslip.to_dict()), 200
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Error generating payslip for user %s, period %s", user_id, period_id)
            return jsonify({"success": False, "message": "Failed to generate payslip"}), 500
