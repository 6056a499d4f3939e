from fastapi import HTTPException, status
from config import (MSG_BOARD_NOT_FOUND, MSG_THREAD_NOT_FOUND, MSG_EMPTY_POST,
                    MSG_INVALID_CAPTCHA, MSG_INVALID_IMAGE)


class ImageboardError(Exception):
    """Base class for every error raised by the imageboard core."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ImageboardError):
    """A submission was rejected; nothing was written."""


class EmptyPostError(ValidationError):
    def __init__(self, message: str = MSG_EMPTY_POST) -> None:
        super().__init__(message)


class InvalidCaptchaError(ValidationError):
    def __init__(self, message: str = MSG_INVALID_CAPTCHA) -> None:
        super().__init__(message)


class UploadError(ValidationError):
    def __init__(self, message: str = MSG_INVALID_IMAGE) -> None:
        super().__init__(message)


class ReservedNameMismatch(ImageboardError):
    """A reserved display name was used without the matching captcha suffix.

    Not a ValidationError: callers answer it with an opaque server fault
    instead of a flash notice.
    """


class NotFoundError(ImageboardError):
    pass


class BoardNotFoundError(NotFoundError):
    def __init__(self, message: str = MSG_BOARD_NOT_FOUND) -> None:
        super().__init__(message)


class ThreadNotFoundError(NotFoundError):
    def __init__(self, message: str = MSG_THREAD_NOT_FOUND) -> None:
        super().__init__(message)


class Exceptions:
    BOARD_NOT_FOUND = HTTPException(status.HTTP_404_NOT_FOUND, MSG_BOARD_NOT_FOUND)
    THREAD_NOT_FOUND = HTTPException(status.HTTP_404_NOT_FOUND, MSG_THREAD_NOT_FOUND)
