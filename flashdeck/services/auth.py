from __future__ import annotations
import logging
from dataclasses import dataclass

from flask_login import UserMixin
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from werkzeug.security import generate_password_hash, check_password_hash

from ..errors import DuplicateUser, InvalidCredentials, MissingCredential, InvalidCredential, ValidationError
from ..stores import UserStore

logger = logging.getLogger(__name__)

TOKEN_SALT = 'flashdeck-session'


@dataclass(frozen=True)
class Identity(UserMixin):
    """The user a request acts for, as carried inside a session token."""
    id: int


class AuthService:
    """Registers users, checks logins, and issues and validates session tokens.

    Tokens are signed with ``secret_key`` and expire ``max_age`` seconds
    after issuance. Validation is a signature and age check only; nothing is
    looked up in the database and there is no revocation.
    """

    def __init__(self, users: UserStore, secret_key: str, max_age: int = 3600,
                 hash_method: str = 'pbkdf2:sha256:600000'):
        self.users = users
        self.max_age = max_age
        self.hash_method = hash_method
        self._serializer = URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)

    def register(self, username: str, password: str) -> str:
        username, password = _require(username, password)
        if self.users.find_by_username(username):
            logger.info("Registration refused, username %r is taken", username)
            raise DuplicateUser()
        pw_hash = generate_password_hash(password, method=self.hash_method)
        user = self.users.insert(username, pw_hash)
        logger.info("Registered user %r (id=%s)", username, user.id)
        return self.issue_credential(user.id)

    def login(self, username: str, password: str) -> str:
        username, password = _require(username, password)
        user = self.users.find_by_username(username)
        if not user or not check_password_hash(user.password_hash, password):
            logger.warning("Failed login for username %r", username)
            raise InvalidCredentials()
        logger.info("User %r logged in", username)
        return self.issue_credential(user.id)

    def issue_credential(self, user_id: int) -> str:
        return self._serializer.dumps({'user': {'id': user_id}})

    def validate_credential(self, token: str | None) -> Identity:
        if not token:
            raise MissingCredential()
        try:
            payload = self._serializer.loads(token, max_age=self.max_age)
        except SignatureExpired:
            logger.debug("Rejected expired token")
            raise InvalidCredential()
        except BadSignature:
            logger.debug("Rejected token with bad signature")
            raise InvalidCredential()
        try:
            return Identity(id=int(payload['user']['id']))
        except (KeyError, TypeError, ValueError):
            raise InvalidCredential()


def _require(username, password):
    username = username if isinstance(username, str) else ''
    password = password if isinstance(password, str) else ''
    if not username.strip() or not password:
        raise ValidationError('Username and password are required')
    return username, password
