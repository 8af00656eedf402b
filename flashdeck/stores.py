from __future__ import annotations
import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .errors import DuplicateUser, StoreUnavailable
from .models import User, Card

logger = logging.getLogger(__name__)


class _Store:
    def __init__(self, session):
        self.session = session

    @contextmanager
    def _guard(self, action: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Store failure while trying to %s", action, exc_info=exc)
            raise StoreUnavailable() from exc


class UserStore(_Store):

    def find_by_username(self, username: str) -> User | None:
        with self._guard('find user'):
            return self.session.query(User).filter_by(username=username).first()

    def insert(self, username: str, password_hash: str) -> User:
        with self._guard('insert user'):
            user = User(username=username, password_hash=password_hash)
            self.session.add(user)
            try:
                self.session.commit()
            except IntegrityError:
                # lost a race with a concurrent registration of the same name
                self.session.rollback()
                raise DuplicateUser()
            return user

    def count(self) -> int:
        with self._guard('count users'):
            return self.session.query(User).count()


class CardStore(_Store):

    def find(self, card_id: int) -> Card | None:
        with self._guard('find card'):
            return self.session.get(Card, card_id)

    def find_by_owner(self, user_id: int, due_before=None) -> list[Card]:
        with self._guard('list cards'):
            q = self.session.query(Card).filter(Card.user_id == user_id)
            if due_before is not None:
                q = q.filter(Card.next_review_date <= due_before)
            return q.order_by(Card.next_review_date, Card.id).all()

    def insert(self, user_id: int, question: str, answer: str, box: int, next_review_date) -> Card:
        with self._guard('insert card'):
            card = Card(user_id=user_id, question=question, answer=answer,
                        box=box, next_review_date=next_review_date)
            self.session.add(card)
            self.session.commit()
            return card

    def update(self, card: Card, **fields) -> Card:
        with self._guard('update card'):
            for name, value in fields.items():
                setattr(card, name, value)
            self.session.commit()
            return card

    def delete(self, card: Card) -> None:
        with self._guard('delete card'):
            self.session.delete(card)
            self.session.commit()
