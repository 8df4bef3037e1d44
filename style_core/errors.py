class ClassificationError(RuntimeError):
    """Raised when a classification rule fails on a token."""

    def __init__(self, token: str, cause: Exception):
        super().__init__(f"Failed to classify class token '{token}': {cause}")
        self.token = token
        self.cause = cause
