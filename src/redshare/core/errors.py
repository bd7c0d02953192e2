"""Domain errors raised by the RedShare services.

Services never build transport responses. They raise one of these exceptions
and the application's exception handler turns it into a JSON body with the
status code carried by the exception.
"""

from __future__ import annotations


class RedShareError(Exception):
    """Base class for all domain failures."""

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(RedShareError):
    """A user, gallery or comment lookup missed."""

    status_code = 404
    default_message = "Not found"


class DuplicateUsernameError(RedShareError):
    """Registration or rename collided with an existing username."""

    status_code = 409
    default_message = "Username already exists"


class EmptyTextError(RedShareError):
    """Comment or reply text is blank after trimming."""

    status_code = 400
    default_message = "Comment text is required"


class ForbiddenError(RedShareError):
    """The caller may not see or change the resource."""

    status_code = 403
    default_message = "You don't have permission to access this gallery"


class SelfFollowError(RedShareError):
    status_code = 400
    default_message = "Cannot follow yourself"


class InvalidReplyTargetError(RedShareError):
    """Replies may only target a root comment of the same gallery."""

    status_code = 400
    default_message = "Replies can only be posted to top-level comments of this gallery"


class InvalidGalleryError(RedShareError):
    status_code = 400
    default_message = "Invalid gallery"


class InvalidUsernameError(RedShareError):
    status_code = 400
    default_message = "Username is required"
