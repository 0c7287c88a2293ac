"""Status values returned by every stage of a pipeline."""

from __future__ import annotations

STATUS_OK = 0
STATUS_ERR = -1
STATUS_CRASH = -996
STATUS_ERROR_INFO_CONNECTOR = " && "

EMPTY = ""
DEFAULT = "default"
UNKNOWN = "unknown"
BASIC_EXCEPTION = "CGraph default exception"
FUNCTION_NO_SUPPORT = "CGraph function no support"


class CStatus:
    """Outcome of an operation: a code and a description.

    A code of zero means success, a negative code means an error that
    stops execution. Positive codes are neither success nor error.
    """

    __slots__ = ("code", "info")

    def __init__(self, info: str | None = None, code: int | None = None) -> None:
        if info is None and code is None:
            self.code = STATUS_OK
            self.info = EMPTY
        else:
            self.code = STATUS_ERR if code is None else code
            self.info = EMPTY if info is None else info

    def __iadd__(self, other: CStatus) -> CStatus:
        if self.is_ok() and other.is_ok():
            return self
        if self.is_ok():
            self.info = other.info
        elif not other.is_ok():
            self.info = f"{self.info}{STATUS_ERROR_INFO_CONNECTOR}{other.info}"
        self.code = STATUS_ERR
        return self

    def set_status(self, info: str, code: int = STATUS_ERR) -> None:
        """Replace the code and description."""
        self.code = code
        self.info = info

    def reset(self) -> None:
        """Return to the success state."""
        self.code = STATUS_OK
        self.info = EMPTY

    def is_ok(self) -> bool:
        return self.code == STATUS_OK

    def is_err(self) -> bool:
        return self.code < STATUS_OK

    def is_crash(self) -> bool:
        return self.code == STATUS_CRASH

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CStatus):
            return NotImplemented
        return self.code == other.code and self.info == other.info

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CStatus(info={self.info!r}, code={self.code})"


def no_support() -> CStatus:
    """Status reported by operations that are not supported."""
    return CStatus(FUNCTION_NO_SUPPORT)