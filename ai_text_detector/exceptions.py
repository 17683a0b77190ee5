"""Module with errors raised by the detector."""


class DetectionError(ValueError):
    """Base class for errors preventing a text from being analysed."""


class EmptyInputError(DetectionError):
    """Raised if a text is empty or contains only whitespace."""

    def __init__(self) -> None:
        """Set the message shown to a caller."""
        super().__init__("Text cannot be empty")


class TextTooShortError(DetectionError):
    """Raised if a text is too short for the metrics to be meaningful."""

    def __init__(self, min_length: int) -> None:
        """
        Set the message shown to a caller.

        Args:
            min_length (int): The minimum number of characters of a trimmed text.
        """
        self.min_length = min_length
        super().__init__(
            "Text too short for reliable analysis "
            f"(minimum {min_length} characters)"
        )


class UnknownStrategyError(DetectionError):
    """Raised if a scoring strategy is requested by a name that is not registered."""
