from __future__ import annotations

from typing import Literal

RecurringErrorKind = Literal["eval", "search"]


class RecurringError(Exception):
    kind: RecurringErrorKind

    def __init__(self, kind: RecurringErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @classmethod
    def eval(cls, message: str) -> RecurringError:
        return cls("eval", message)

    @classmethod
    def search(cls, message: str) -> RecurringError:
        return cls("search", message)
