from __future__ import annotations
from dataclasses import dataclass
from flask import current_app

from .auth import AuthService
from .cards import CardService


@dataclass
class Services:
    auth: AuthService
    cards: CardService


def services() -> Services:
    return current_app.extensions['flashdeck']
