from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Course:
    # course_number is the catalog key; compared as a plain str (ordinal, case-sensitive)
    course_number: str
    title: str = ""

    # order as encountered in the source line; not checked against the catalog
    prerequisites: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable from callers but always store an immutable tuple
        if not isinstance(self.prerequisites, tuple):
            object.__setattr__(self, "prerequisites", tuple(self.prerequisites))

    def to_dict(self) -> dict:
        return {
            "course_number": self.course_number,
            "title": self.title,
            "prerequisites": list(self.prerequisites),
        }

    def __repr__(self) -> str:
        return f"<Course {self.course_number} {self.title}>"
