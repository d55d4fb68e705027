class InvalidOrExpiredCode(ValueError):
    def __init__(self, message: str = "Invalid or expired OTP"):
        super().__init__(message)


class InvalidCredentials(ValueError):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AccountExists(ValueError):
    def __init__(self, message: str = "An account with this email or phone already exists"):
        super().__init__(message)


class VerificationRequired(ValueError):
    pass


class InvalidTransition(ValueError):
    pass


class NotFound(LookupError):
    def __str__(self) -> str:
        # LookupError repr-quotes a single argument
        return self.args[0] if self.args else "Not found"
