from flask import Flask, jsonify, render_template, request
from jsonschema import ValidationError as SchemaError, validate

from pertcpm.config import settings
from pertcpm.graph import rows_from_dicts
from pertcpm.logger import configure_logging
from pertcpm.report import format_critical_path, result_to_dict
from pertcpm.sample import SAMPLE_PROJECT
from pertcpm.scheduling import schedule

logger = configure_logging(__name__)

ACTIVITY_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "duration": {"type": "integer"},
        "predecessors": {
            "anyOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
                {"type": "null"},
            ]
        },
    },
    "required": ["id", "duration"],
}

REQUEST_SCHEMA = {
    "type": "object",
    "properties": {
        "activities": {"type": "array", "items": ACTIVITY_SCHEMA},
        "strict": {"type": "boolean"},
    },
    "required": ["activities"],
}

app = Flask(__name__)
PROJECT = {
    "activities": [
        {"id": activityId, "duration": duration, "predecessors": spec}
        for activityId, duration, spec in SAMPLE_PROJECT
    ]
}


@app.get("/")
def home():
    try:
        result = schedule(rows_from_dicts(PROJECT["activities"]))
    except ValueError as e:
        return render_template("index.html", result=None, error=str(e))
    return render_template(
        "index.html",
        result=result,
        critical_path=format_critical_path(result),
        error=None,
    )


@app.get("/api/health")
def health():
    return jsonify({"ok": True})


@app.get("/api/activities")
def get_activities():
    return jsonify(PROJECT["activities"])


@app.post("/api/activities")
def set_activities():
    data = request.get_json(force=True, silent=True) or {}
    try:
        validate(instance=data, schema=REQUEST_SCHEMA)
    except SchemaError as e:
        return jsonify({"ok": False, "error": e.message}), 400
    PROJECT["activities"] = data["activities"]
    logger.info("Project replaced with %d activities", len(PROJECT["activities"]))
    return jsonify({"ok": True, "count": len(PROJECT["activities"])})


@app.post("/api/analyze")
def analyze():
    data = request.get_json(force=True, silent=True) or {}
    try:
        validate(instance=data, schema=REQUEST_SCHEMA)
        result = schedule(rows_from_dicts(data["activities"]), strict=data.get("strict"))
    except SchemaError as e:
        logger.warning("Rejected analyze request: %s", e.message)
        return jsonify({"ok": False, "error": e.message}), 400
    except ValueError as e:
        logger.warning("Cannot schedule project: %s", e)
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "result": result_to_dict(result)})


if __name__ == "__main__":
    app.run(host=settings.FLASK_HOST, port=settings.FLASK_PORT, debug=settings.FLASK_DEBUG)
