from typing import Iterable, Optional
from exceptions import EmptyPostError, InvalidCaptchaError, ReservedNameMismatch
from models import PostSubmission
from config import CAPTCHA_MIN_LENGTH, RESERVED_NAMES, RESERVED_NAME_CAPTCHA_SUFFIX


class SubmissionValidator:
    """Gate every create/reply request passes before anything is stored.

    The captcha is only checked for presence and length; the client does the
    real challenge. Reserved display names additionally need a token ending
    in the configured suffix.
    """

    def __init__(self, reserved_names: Iterable[str] = RESERVED_NAMES,
                 min_length: int = CAPTCHA_MIN_LENGTH,
                 reserved_suffix: str = RESERVED_NAME_CAPTCHA_SUFFIX) -> None:
        self.reserved_names = frozenset(reserved_names)
        self.min_length = min_length
        self.reserved_suffix = reserved_suffix

    def verify_captcha(self, captcha: Optional[str], name: Optional[str]) -> None:
        if not captcha:
            raise InvalidCaptchaError()

        if name in self.reserved_names and not captcha.endswith(self.reserved_suffix):
            raise ReservedNameMismatch(f"Reserved name {name!r} used without matching captcha")

        if len(captcha) < self.min_length:
            raise InvalidCaptchaError()

    def validate(self, submission: PostSubmission) -> None:
        """Raise the first failing check, in the order the board has always used."""
        self.verify_captcha(submission.captcha, submission.name)

        content = submission.content
        if not (content and content.strip()) and not submission.has_image:
            raise EmptyPostError()
