# AGPL-3.0 License

"""
Severity levels reported by the style checker.
"""

from enum import Enum


class SeverityLevel(Enum):
    """
    Seriousness of a style violation, in ascending order.
    """

    IGNORE = "ignore"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, text: str) -> "SeverityLevel":
        """Look up a level by its name, ignoring case."""
        return cls(text.strip().lower())

    @property
    def rank(self) -> int:
        return list(SeverityLevel).index(self)

    def __lt__(self, other):
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value
