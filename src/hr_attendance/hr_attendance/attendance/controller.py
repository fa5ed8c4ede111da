from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from .service import BulkEntry


def register(app: Flask, container: Container) -> None:
    service = container.suggestion_service

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _observation(data: dict, schedule):
        return service.observation_from_fields(
            schedule=schedule,
            shift_date=data.get("shift_date"),
            time_in_date=data.get("time_in_date"),
            time_in_time=data.get("time_in_time"),
            time_out_date=data.get("time_out_date"),
            time_out_time=data.get("time_out_time"),
        )

    def _user_id(value) -> int:
        try:
            user_id = int(value)
        except (TypeError, ValueError):
            raise ValidationError("user_id is required")
        if user_id <= 0:
            raise ValidationError("user_id is invalid")
        return user_id

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/attendance/suggest-status", methods=["POST"], endpoint="api_suggest_status")
    def api_suggest_status():
        """Suggested status for the single-entry form, recomputed on field changes."""
        try:
            data = _json_body()
            schedule = service.parse_schedule(data.get("schedule"))
            observation = _observation(data, schedule)
            result = service.suggest(schedule, observation)
            suggestion = service.resolve(result, data.get("status"))
        except ValidationError:
            raise
        except Exception:
            app.logger.exception("status suggestion failed")
            return jsonify({"success": False, "message": "Could not compute a status suggestion"}), 500

        effective_secondary = suggestion.effective_secondary_status
        return jsonify(
            {
                "success": True,
                "suggestion": result.to_dict(),
                "schedule": schedule.to_dict() if schedule else None,
                "effective_status": suggestion.effective_status.value if suggestion.effective_status else None,
                "effective_secondary_status": effective_secondary.value if effective_secondary else None,
                "is_overridden": suggestion.is_overridden,
            }
        ), 200

    @app.route("/api/attendance/bulk-suggest", methods=["POST"], endpoint="api_bulk_suggest")
    def api_bulk_suggest():
        """Bulk entry: same times for every selected employee, each with their own schedule."""
        try:
            data = _json_body()
            employees = data.get("employees")
            if not isinstance(employees, list) or not employees:
                raise ValidationError("Select at least one employee")

            entries = []
            for emp in employees:
                if not isinstance(emp, dict):
                    raise ValidationError("Each employee must be an object")
                schedule = service.parse_schedule(emp.get("schedule"))
                entries.append(
                    BulkEntry(
                        user_id=_user_id(emp.get("user_id")),
                        schedule=schedule,
                        observation=_observation(data, schedule),
                    )
                )

            rows = []
            for s in service.suggest_bulk(entries):
                suggestion = service.resolve(s.result, data.get("status"))
                rows.append(
                    {
                        "user_id": s.user_id,
                        "suggestion": s.result.to_dict(),
                        "payload": service.build_payload(
                            user_id=s.user_id,
                            observation=s.observation,
                            suggestion=suggestion,
                            notes=data.get("notes"),
                        )
                        if suggestion.effective_status
                        else None,
                    }
                )
        except ValidationError:
            raise
        except Exception:
            app.logger.exception("bulk status suggestion failed")
            return jsonify({"success": False, "message": "Could not compute status suggestions"}), 500

        return jsonify({"success": True, "rows": rows}), 200

    @app.route("/api/attendance/payload", methods=["POST"], endpoint="api_attendance_payload")
    def api_attendance_payload():
        """Payload ready for submission to the attendance API."""
        try:
            data = _json_body()
            schedule = service.parse_schedule(data.get("schedule"))
            observation = _observation(data, schedule)
            suggestion = service.resolve(service.suggest(schedule, observation), data.get("status"))
            payload = service.build_payload(
                user_id=_user_id(data.get("user_id")),
                observation=observation,
                suggestion=suggestion,
                notes=data.get("notes"),
            )
        except ValidationError:
            raise
        except Exception:
            app.logger.exception("payload build failed")
            return jsonify({"success": False, "message": "Could not build attendance payload"}), 500

        return jsonify({"success": True, "payload": payload}), 200

    @app.route("/api/attendance/statuses", methods=["GET"], endpoint="api_attendance_statuses")
    def api_attendance_statuses():
        return jsonify({"success": True, "statuses": service.status_catalog()}), 200
