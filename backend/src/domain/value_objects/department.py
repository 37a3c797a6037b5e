"""
Department - closed set of support departments a thread can be opened with.
"""

from enum import Enum


class Department(str, Enum):
    TECH = "tech"
    PAYMENT = "payment"
    COMPLAINT = "complaint"
    OTHER = "other"

    @classmethod
    def values(cls) -> list[str]:
        return [d.value for d in cls]
