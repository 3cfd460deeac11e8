from pathlib import Path

from flask import abort, current_app, jsonify, request

from . import catalog_bp
from extensions import catalog_store
from services.catalog import CatalogLoadError
from utils.formatting import format_prerequisites


@catalog_bp.route("/courses")
def list_courses():
    with catalog_store.session() as catalog:
        courses = catalog.list_courses()

    # empty list is a valid answer; the client decides how to show it
    return jsonify(
        {
            "count": len(courses),
            "courses": [c.to_dict() for c in courses],
        }
    )


@catalog_bp.route("/courses/<path:course_number>")
def get_course(course_number: str):
    with catalog_store.session() as catalog:
        course = catalog.lookup(course_number)

    if course is None:
        abort(404, description=f"Course not found: {course_number}")

    payload = course.to_dict()
    payload["prerequisites_display"] = format_prerequisites(course)
    return jsonify(payload)


def _resolve_catalog_file(raw: str) -> str:
    # Posted paths may only name files inside CATALOG_DIR; relative paths are
    # taken from there.
    catalog_dir = Path(current_app.config["CATALOG_DIR"]).resolve()
    candidate = Path(raw)
    if not candidate.is_absolute():
        candidate = catalog_dir / candidate
    candidate = candidate.resolve()

    if not candidate.is_relative_to(catalog_dir):
        current_app.logger.warning("rejected load outside catalog dir: %s", raw)
        abort(400, description=f"Path {raw} is outside the catalog directory.")
    return str(candidate)


@catalog_bp.route("/catalog/load", methods=["POST"])
def load_catalog():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object.")

    raw = data.get("path") or request.form.get("path") or ""
    if not isinstance(raw, str):
        abort(400, description="path must be a string.")

    raw = raw.strip()
    if raw:
        path = _resolve_catalog_file(raw)
    else:
        path = current_app.config["CATALOG_PATH"]

    with catalog_store.session() as catalog:
        try:
            result = catalog.load(path)
        except CatalogLoadError as e:
            current_app.logger.warning("load request failed: %s", e)
            abort(400, description=f"Could not open file {path}. Please check the file name and path.")
        total = len(catalog)

    return jsonify(
        {
            "path": path,
            "loaded": result.loaded,
            "skipped": result.skipped,
            "total": total,
        }
    )
