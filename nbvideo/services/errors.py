class PreconditionError(Exception):
    """Request or configuration is unusable; raised before any browser is launched."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class AutomationError(Exception):
    pass


class AuthenticationError(AutomationError):
    pass


class GenerationTimeoutError(AutomationError):
    pass
