"""Root of the CoopCredit Guard error hierarchy."""


class DomainException(Exception):
    """
    A rule of the lending domain was violated.

    Every subclass carries a stable machine-readable ``code`` that the API
    returns in the ``error`` field, next to the human-readable ``message``.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)
