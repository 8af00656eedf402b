from __future__ import annotations
from flask import Blueprint, request, jsonify
from flask_login import login_required, current_user
from ..errors import NotFound
from ..services import services

bp = Blueprint('flashcards', __name__)


def _body() -> dict:
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else {}


def _card_id(raw: str) -> int:
    # parsed after login_required so a bad id never skips authentication
    try:
        return int(raw)
    except ValueError:
        raise NotFound()


@bp.post('/flashcards')
@login_required
def add():
    data = _body()
    card = services().cards.add_card(current_user, data.get('question'), data.get('answer'))
    return jsonify(card.to_dict())


@bp.get('/flashcards')
@login_required
def cards():
    due_only = request.args.get('due', '').lower() in ('1', 'true', 'yes')
    rows = services().cards.list_cards(current_user, due_only=due_only)
    return jsonify([c.to_dict() for c in rows])


@bp.get('/flashcards/<card_id>')
@login_required
def card(card_id):
    return jsonify(services().cards.get_card(current_user, _card_id(card_id)).to_dict())


@bp.put('/flashcards/<card_id>')
@login_required
def update(card_id):
    data = _body()
    card = services().cards.update_card(
        current_user, _card_id(card_id),
        question=data.get('question'),
        answer=data.get('answer'),
        correct=data.get('correct'),
    )
    return jsonify(card.to_dict())


@bp.delete('/flashcards/<card_id>')
@login_required
def delete(card_id):
    services().cards.delete_card(current_user, _card_id(card_id))
    return jsonify({"msg": "Flashcard deleted"})
