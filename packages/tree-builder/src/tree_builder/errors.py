"""Error types shared by the report packages.

Filesystem failures are not wrapped: listing or writing errors surface as the
``OSError`` raised by the standard library.
"""


class ReportError(Exception):
    """Base class for every non-I/O failure of the report pipeline."""


class MalformedEntryError(ReportError):
    """A filesystem entry cannot be turned into a tree node.

    Raised for a directory without a base name (``/``) and, in strict mode,
    for a file without an extension, and for a kept directory or image whose
    name is not valid UTF-8.
    """

    def __init__(self, path, reason: str) -> None:
        self.path = path
        self.reason = reason
        # undecodable bytes show up as escapes so the message is always printable
        shown = str(path).encode("utf-8", "backslashreplace").decode("utf-8")
        super().__init__(f"{reason}: {shown}")
