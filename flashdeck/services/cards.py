from __future__ import annotations
import logging

from ..errors import ValidationError
from ..gateway import load_owned_card
from ..models import Card
from ..scheduler import Outcome, advance_schedule, initialize_schedule, utcnow
from ..stores import CardStore
from .auth import Identity

logger = logging.getLogger(__name__)


class CardService:
    """Card operations for one authenticated owner at a time."""

    def __init__(self, cards: CardStore):
        self.cards = cards

    def add_card(self, identity: Identity, question, answer) -> Card:
        question, answer = _text(question), _text(answer)
        if not question or not answer:
            raise ValidationError('question and answer are required')
        schedule = initialize_schedule()
        card = self.cards.insert(identity.id, question, answer,
                                 box=schedule.box, next_review_date=schedule.next_review_date)
        logger.info("User %s added card %s", identity.id, card.id)
        return card

    def list_cards(self, identity: Identity, due_only: bool = False, now=None) -> list[Card]:
        due_before = (now or utcnow()) if due_only else None
        return self.cards.find_by_owner(identity.id, due_before=due_before)

    def get_card(self, identity: Identity, card_id: int) -> Card:
        return load_owned_card(self.cards, card_id, identity)

    def update_card(self, identity: Identity, card_id: int, question=None, answer=None,
                    correct=None, now=None) -> Card:
        """Edit the content of a card and/or record a review outcome.

        Content fields are only replaced when a non-empty value is given.
        Scheduling only moves when ``correct`` is given.
        """
        card = load_owned_card(self.cards, card_id, identity)
        fields = {}
        if _text(question):
            fields['question'] = _text(question)
        if _text(answer):
            fields['answer'] = _text(answer)
        if correct is not None:
            outcome = Outcome.from_flag(correct)
            schedule = advance_schedule(card.box, outcome, now or utcnow())
            fields['box'] = schedule.box
            fields['next_review_date'] = schedule.next_review_date
            logger.info("Card %s answered %s, box %s -> %s",
                        card.id, outcome.value, card.box, schedule.box)
        if not fields:
            return card
        return self.cards.update(card, **fields)

    def delete_card(self, identity: Identity, card_id: int) -> None:
        card = load_owned_card(self.cards, card_id, identity)
        self.cards.delete(card)
        logger.info("User %s deleted card %s", identity.id, card_id)


def _text(value) -> str:
    return value.strip() if isinstance(value, str) else ''
