"""
Request authorization and per-owner access checks.

``authorize`` is installed as Flask-Login's request loader, so any view under
``@login_required`` is refused before it runs when the token is absent or bad.
"""
from __future__ import annotations
from flask import current_app

from .errors import Forbidden, MissingCredential, NotFound
from .extensions import login_manager


@login_manager.request_loader
def authorize(request):
    token = request.headers.get(current_app.config['AUTH_HEADER'])
    return current_app.extensions['flashdeck'].auth.validate_credential(token)


@login_manager.unauthorized_handler
def _unauthorized():
    raise MissingCredential()


def enforce_ownership(card, identity) -> None:
    if card.user_id != identity.id:
        current_app.logger.warning("User %s denied access to card %s", identity.id, card.id)
        raise Forbidden()


def load_owned_card(cards, card_id, identity):
    card = cards.find(card_id)
    if card is None:
        raise NotFound()
    enforce_ownership(card, identity)
    return card
