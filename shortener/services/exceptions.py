class MissingUrlError(Exception):
    """Raised when a link is submitted without a target URL."""

    def __init__(self, message: str = "URL is required."):
        super().__init__(message)
        self.message = message


class ShortCodeExistsError(Exception):
    """Raised when the requested short code is already taken."""

    def __init__(self, short_code: str):
        self.short_code = short_code
        self.message = "Shortcode already exists. Please try again."
        super().__init__(self.message)


class LinkNotFoundError(Exception):
    """Raised when a short code does not exist."""

    def __init__(self, short_code: str):
        self.short_code = short_code
        self.message = "Shortcode not found."
        super().__init__(self.message)
