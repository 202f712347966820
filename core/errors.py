from __future__ import annotations


class FormatError(ValueError):
    """
    Raised when the interface table or a metric namespace is malformed.

    Aborts the current discovery or collection call.
    """
