"""
Domain exceptions.

Raised by the analytics engine on caller-side contract violations and
translated to HTTP 400 by the exception handler in :mod:`app.main`.
"""


class InvalidArgumentError(ValueError):
    """A request parameter is outside its accepted range.

    ``parameter`` names the offending argument so the API layer can
    report it back to the client.
    """

    def __init__(self, parameter: str, message: str):
        super().__init__(f"{parameter}: {message}")
        self.parameter = parameter
        self.message = message
