class NamingConventionError(Exception):
    def __init__(
        self, message: str, *, derivation: str | None = None, subject: object = None
    ) -> None:
        super().__init__(message)
        self.derivation = derivation
        self.subject = subject

    def __str__(self) -> str:
        message = super().__str__()
        if self.derivation is None:
            return message
        return f"{message} [{self.derivation}: {self.subject!r}]"


class InvalidArgumentError(NamingConventionError, ValueError):
    pass


class IllegalStateError(NamingConventionError, RuntimeError):
    pass
