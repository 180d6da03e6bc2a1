"""Client-side submission exceptions."""


class SubmissionError(Exception):
    """A form submission failed. ``message`` is safe to show to the user."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
