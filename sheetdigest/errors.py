from __future__ import annotations


class DigestError(RuntimeError):
    """Terminal failure for one digest run; the message is user-facing."""


class ClipboardUnavailableError(DigestError):
    pass


class ClipboardReadError(DigestError):
    pass


class ClipboardWriteError(DigestError):
    pass


class NoRowsError(DigestError):
    pass
