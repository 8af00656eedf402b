from flask import Blueprint, request, jsonify
from ..services import services

bp = Blueprint('auth', __name__)


def _credentials():
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        data = {}
    return data.get('username'), data.get('password')


@bp.post('/register')
def register():
    username, password = _credentials()
    token = services().auth.register(username, password)
    return jsonify({"token": token})


@bp.post('/login')
def login():
    username, password = _credentials()
    token = services().auth.login(username, password)
    return jsonify({"token": token})
