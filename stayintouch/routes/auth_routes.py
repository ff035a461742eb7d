# stayintouch/routes/auth_routes.py
from flask import Blueprint, request, jsonify
from flask_login import login_user, logout_user, login_required

bp = Blueprint('auth', __name__, url_prefix='/auth')


def _users():
    from .. import user_service
    return user_service


@bp.route('/local', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    email = data.get('email')
    password = data.get('password')

    user = _users().get_user_by_email(email)
    if not user:
        return jsonify({'message': 'This email is not registered.'}), 401
    if not _users().verify_password(user, password):
        return jsonify({'message': 'This password is not correct.'}), 401

    login_user(user)
    return jsonify(user.to_json())


@bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return '', 204
