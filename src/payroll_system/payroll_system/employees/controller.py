from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..core.logging_config import get_logger
from ..container import Container

logger = get_logger("employees.controller")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:user_id>/hourly-rate", methods=["PATCH"], endpoint="employee_hourly_rate")
    def employee_hourly_rate(user_id: int):
        data = request.get_json(silent=True) or {}
        try:
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")
            salary = container.employee_pay_service.set_hourly_rate(user_id=user_id, hourly_rate=data.get("hourly_rate"))
            return jsonify({"message": "Pay rate updated", "user_id": user_id, "salary": float(salary)}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Error updating pay rate for user %s", user_id)
            return jsonify({"success": False, "message": "Failed to update pay rate"}), 500
