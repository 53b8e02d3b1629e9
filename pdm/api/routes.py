"""
pdm/api/routes.py
─────────────────
REST interface over the MonitorStore, mounted on the dashboard's Flask server.

Endpoints:
  GET  /                       — API banner
  GET  /equipment              — Equipment list
  GET  /sensor/<id>            — Latest reading for one equipment
  GET  /sensors                — Latest readings, newest first
  POST /predict/<id>           — Risk score of the stored reading
  GET  /alerts                 — Alert log, newest first
  POST /alerts                 — Create alert {equipmentId, level, message}
  POST /alerts/<id>/ack        — Acknowledge alert
  GET  /maintenance            — Work orders, newest first
  POST /maintenance            — Create work order {equipmentId, title, notes?}
  POST /workorder/<id>/close   — Close work order

Errors are JSON {"error": "..."} with 404 (unknown id) or 400 (bad payload).
"""
from __future__ import annotations

import logging

from flask import Blueprint, Flask, jsonify, request
from flask_cors import CORS

from pdm.data.store import BadRequestError, MonitorStore, NotFoundError

logger = logging.getLogger(__name__)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadRequestError("JSON object body required")
    return data


def create_blueprint(store: MonitorStore) -> Blueprint:
    api = Blueprint("api", __name__)

    @api.errorhandler(NotFoundError)
    def not_found(exc: NotFoundError):
        return jsonify({"error": str(exc)}), 404

    @api.errorhandler(BadRequestError)
    def bad_request(exc: BadRequestError):
        logger.info("Rejected %s %s: %s", request.method, request.path, exc)
        return jsonify({"error": str(exc)}), 400

    @api.route("/")
    def index():
        return jsonify({
            "message": "Predictive Maintenance API running",
            "dashboard": "/dashboard/",
        })

    # ── Equipment & sensors ───────────────────────────────────────────────────

    @api.route("/equipment")
    def equipment():
        return jsonify([eq.to_wire() for eq in store.list_equipment()])

    @api.route("/sensor/<equipment_id>")
    def sensor(equipment_id: str):
        return jsonify(store.get_reading(equipment_id).to_wire())

    @api.route("/sensors")
    def sensors():
        return jsonify([r.to_wire() for r in store.list_readings()])

    @api.route("/predict/<equipment_id>", methods=["POST"])
    def predict(equipment_id: str):
        prediction, reading = store.predict(equipment_id)
        return jsonify({
            **prediction.model_dump(mode="json"),
            "reading": reading.to_wire(),
        })

    # ── Alerts ────────────────────────────────────────────────────────────────

    @api.route("/alerts", methods=["GET"])
    def list_alerts():
        return jsonify([a.to_wire() for a in store.list_alerts()])

    @api.route("/alerts", methods=["POST"])
    def create_alert():
        alert = store.create_alert(_json_body())
        return jsonify(alert.to_wire())

    @api.route("/alerts/<alert_id>/ack", methods=["POST"])
    def acknowledge_alert(alert_id: str):
        return jsonify(store.acknowledge_alert(alert_id).to_wire())

    # ── Work orders ───────────────────────────────────────────────────────────

    @api.route("/maintenance", methods=["GET"])
    def list_work_orders():
        return jsonify([w.to_wire() for w in store.list_work_orders()])

    @api.route("/maintenance", methods=["POST"])
    def create_work_order():
        order = store.create_work_order(_json_body())
        return jsonify(order.to_wire())

    @api.route("/workorder/<work_order_id>/close", methods=["POST"])
    def close_work_order(work_order_id: str):
        return jsonify(store.close_work_order(work_order_id).to_wire())

    return api


def register(server: Flask, store: MonitorStore) -> None:
    """Attach the REST routes (CORS fully open) to a Flask server."""
    CORS(server, send_wildcard=True)
    server.register_blueprint(create_blueprint(store))
