"""
Custom exception types for the toy robot command pipeline.
Logical command rejections are reported through Outcome values, not exceptions.
"""


class CommandSourceError(RuntimeError):
    """Command input could not be opened or read (missing file, broken stream)."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"Command source error: {message}")

    def __str__(self):
        return f"Command source error: {self.original_message}"
