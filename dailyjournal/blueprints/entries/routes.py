from flask import request, jsonify, current_app
from flask_login import login_required, current_user
from pydantic import ValidationError

from ...extensions import db, limiter
from ...models.competency import Competency
from ...store import EntryStore, EntryNotFound, PersistenceError, UnknownCompetency
from .schemas import EntryIn, MAX_ID, describe_errors
from . import entries_bp


def _store() -> EntryStore:
    return EntryStore(db.session)


def _entry_payload() -> EntryIn:
    # Anything but a JSON object fails validation as a whole
    return EntryIn.model_validate(request.get_json(silent=True))


@entries_bp.errorhandler(ValidationError)
def bad_payload(e):
    return jsonify({"error": describe_errors(e)}), 400


@entries_bp.errorhandler(UnknownCompetency)
def unknown_competency(e):
    return jsonify({"error": str(e)}), 400


@entries_bp.errorhandler(EntryNotFound)
def not_found(e):
    current_app.logger.info(f"{request.method} {request.path}: {e} for {current_user.email}")
    return jsonify({"error": "Not found"}), 404


@entries_bp.errorhandler(PersistenceError)
def failed(e):
    # Details were logged by the store; the client only learns that it failed
    return jsonify({"error": "Failed"}), 500


@entries_bp.route("/entry", methods=["GET"])
@login_required
def list_entries():
    records = _store().list_for_owner(current_user.email)
    return jsonify([r.to_dict() for r in records])


@entries_bp.route("/entry", methods=["POST"])
@limiter.limit(lambda: current_app.config["ENTRY_RATE_LIMIT"])
@login_required
def create_entry():
    payload = _entry_payload()
    record = _store().create(current_user.email, payload.text, payload.competency_ids)
    return jsonify(record.to_dict())


@entries_bp.route(f"/entry/<int(min=1, max={MAX_ID}):entry_id>", methods=["PUT"])
@login_required
def update_entry(entry_id: int):
    payload = _entry_payload()
    _store().update(current_user.email, entry_id, payload.text, payload.competency_ids)
    return jsonify({"message": "Updated"})


@entries_bp.route(f"/entry/<int(min=1, max={MAX_ID}):entry_id>", methods=["DELETE"])
@login_required
def delete_entry(entry_id: int):
    current_app.logger.info(f"DELETE entry {entry_id} requested by {current_user.email}")
    _store().delete(current_user.email, entry_id)
    return jsonify({"message": "Deleted"})


@entries_bp.route("/competencies", methods=["GET"])
@login_required
def list_competencies():
    competencies = Competency.query.order_by(Competency.id.asc()).all()
    return jsonify([c.to_dict() for c in competencies])
