class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""
    status_code = 500
    message = 'Server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self):
        return {'error': type(self).__name__, 'msg': self.message}


class ValidationError(FlashdeckError):
    """Raised when a required field is missing or empty."""
    status_code = 400
    message = 'Missing required fields'


class DuplicateUser(FlashdeckError):
    status_code = 400
    message = 'User already exists'


class InvalidCredentials(FlashdeckError):
    """Unknown username or wrong password; both read the same."""
    status_code = 400
    message = 'Invalid Credentials'


class MissingCredential(FlashdeckError):
    status_code = 401
    message = 'No token, authorization denied'


class InvalidCredential(FlashdeckError):
    """Token malformed, signed by someone else, or expired."""
    status_code = 401
    message = 'Token is not valid'


class Forbidden(FlashdeckError):
    status_code = 403
    message = 'Not allowed to access this flashcard'


class NotFound(FlashdeckError):
    status_code = 404
    message = 'Flashcard not found'


class StoreUnavailable(FlashdeckError):
    """Raised when the database cannot serve a request."""
    status_code = 500
    message = 'Server error'
