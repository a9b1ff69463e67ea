"""Errors raised while ingesting documents."""


class UnsupportedFormatError(ValueError):
    """File extension is neither .pdf nor .epub."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Unsupported file type: {filename}")


class DocumentReadError(ValueError):
    """The document container itself could not be opened."""
