"""Registration workflow errors."""


class RegistrationError(Exception):
    """Base class for failures of the registration workflow."""

    pass


class WorkshopNotFoundError(RegistrationError):
    """Raised when a slug is unknown or the workshop is inactive."""

    def __init__(self, slug: str):
        super().__init__(f"Workshop not found or inactive: {slug}")
        self.slug = slug


class RosterUnavailableError(RegistrationError):
    """Raised when the member roster cannot be loaded."""

    pass


class RegistrationPersistenceError(RegistrationError):
    """Raised when the registration row could not be written."""

    pass
