# stayintouch/errors.py


class ContactValidationError(ValueError):
    """Raised when a contact or interaction payload cannot be stored."""


def error_payload(error):
    """Serializes an exception into the body sent with a 500 response."""
    return {
        "name": type(error).__name__,
        "message": str(error)
    }
