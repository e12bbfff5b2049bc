"""Root of the Trakr exception hierarchy."""


class TrakrException(Exception):
    """
    Base class for rule violations and storage failures.

    Every subclass carries a stable machine-readable code; the HTTP layer
    reports it as the "error" field and picks the status from the class.
    """

    def __init__(self, message: str, code: str = "TRAKR_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.code, "message": self.message}
