# stayintouch/routes/user_routes.py
from flask import Blueprint, request, jsonify
from flask_login import login_required, current_user, login_user
from functools import wraps

bp = Blueprint('users', __name__, url_prefix='/api/users')


def _users():
    from .. import user_service
    return user_service


def admin_required(f):
    @wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        if not current_user.is_admin:
            return '', 403
        return f(*args, **kwargs)
    return decorated_function


@bp.route('', methods=['POST'])
def create():
    data = request.get_json(silent=True) or {}
    try:
        user = _users().create_user(
            name=data.get('name'),
            email=data.get('email'),
            password=data.get('password')
        )
    except ValueError as e:
        return jsonify({'message': str(e)}), 422

    login_user(user)
    return jsonify(user.to_json()), 201


@bp.route('/me', methods=['GET'])
@login_required
def me():
    return jsonify(current_user.to_json())


@bp.route('/me/password', methods=['PUT'])
@login_required
def change_password():
    data = request.get_json(silent=True) or {}
    changed = _users().change_password(
        current_user,
        data.get('oldPassword'),
        data.get('newPassword')
    )
    if not changed:
        return '', 403
    return '', 204


@bp.route('', methods=['GET'])
@admin_required
def index():
    return jsonify([user.to_json() for user in _users().list_users()])


@bp.route('/<user_id>', methods=['DELETE'])
@admin_required
def destroy(user_id):
    from .. import contact_service

    if not _users().delete_user(user_id):
        return '', 404
    contact_service.delete_for_user(user_id)
    return '', 204
