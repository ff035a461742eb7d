# stayintouch/routes/contact_routes.py
"""
REST endpoints for the authenticated user's contacts.

GET     /api/contacts                                   -> index
POST    /api/contacts                                   -> create
GET     /api/contacts/<id>                              -> show
PUT     /api/contacts/<id>                              -> update
DELETE  /api/contacts/<id>                              -> destroy
POST    /api/contacts/<id>/interactions                 -> create_interaction
DELETE  /api/contacts/<id>/interactions/<interaction_id> -> destroy_interaction
"""
from flask import Blueprint, request, jsonify, current_app
from flask_login import login_required, current_user
from ..errors import error_payload
from ..services.ownership import LookupStatus

bp = Blueprint('contacts', __name__, url_prefix='/api/contacts')


def _contacts():
    from .. import contact_service
    return contact_service


def respond_with_result(contact, status_code=200):
    return jsonify(contact.to_json()), status_code


def handle_error(e):
    current_app.logger.error(f"Contact request failed: {e}", exc_info=True)
    return jsonify(error_payload(e)), 500


def guard_response(lookup):
    """Empty-bodied 404/403 for a lookup that did not find an owned contact."""
    if lookup.status is LookupStatus.FORBIDDEN:
        return '', 403
    return '', 404


@bp.route('', methods=['GET'])
@login_required
def index():
    try:
        contacts = _contacts().list_for_user(current_user.id)
        return jsonify([contact.to_json() for contact in contacts])
    except Exception as e:
        return handle_error(e)


@bp.route('/<contact_id>', methods=['GET'])
@login_required
def show(contact_id):
    try:
        lookup = _contacts().lookup(contact_id, current_user.id)
        if not lookup.found:
            return guard_response(lookup)
        return respond_with_result(lookup.contact)
    except Exception as e:
        return handle_error(e)


@bp.route('', methods=['POST'])
@login_required
def create():
    try:
        contact = _contacts().create(request.get_json(silent=True), current_user.id)
        return respond_with_result(contact, 201)
    except Exception as e:
        return handle_error(e)


@bp.route('/<contact_id>', methods=['PUT'])
@login_required
def update(contact_id):
    try:
        lookup = _contacts().lookup(contact_id, current_user.id)
        if not lookup.found:
            return guard_response(lookup)
        contact = _contacts().update(lookup.contact, request.get_json(silent=True))
        return respond_with_result(contact)
    except Exception as e:
        return handle_error(e)


@bp.route('/<contact_id>', methods=['DELETE'])
@login_required
def destroy(contact_id):
    try:
        lookup = _contacts().lookup(contact_id, current_user.id)
        if not lookup.found:
            return guard_response(lookup)
        _contacts().remove(lookup.contact)
        return '', 204
    except Exception as e:
        return handle_error(e)


@bp.route('/<contact_id>/interactions', methods=['POST'])
@login_required
def create_interaction(contact_id):
    try:
        lookup = _contacts().lookup(contact_id, current_user.id)
        if not lookup.found:
            return guard_response(lookup)
        contact = _contacts().add_interaction(lookup.contact, request.get_json(silent=True))
        return respond_with_result(contact)
    except Exception as e:
        return handle_error(e)


@bp.route('/<contact_id>/interactions/<interaction_id>', methods=['DELETE'])
@login_required
def destroy_interaction(contact_id, interaction_id):
    try:
        lookup = _contacts().lookup(contact_id, current_user.id)
        if not lookup.found:
            return guard_response(lookup)
        contact = _contacts().remove_interaction(lookup.contact, interaction_id)
        return respond_with_result(contact)
    except Exception as e:
        return handle_error(e)
