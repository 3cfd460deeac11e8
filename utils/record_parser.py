from __future__ import annotations

from typing import Iterable, Iterator, Optional

from models.course import Course


DEFAULT_DELIMITER = ","


def parse_course_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> Optional[Course]:
    """Turn one catalog line into a Course.

    Format: <course_number>,<title>[,<prereq1>[,<prereq2>...]]

    Returns None when the line has fewer than two fields, or when nothing
    follows the first delimiter ("X1,"). An empty title is fine when more
    fields follow ("X1,,Pre1"). Each prerequisite loses at most ONE leading
    space; a field that ends up empty is dropped. No quoting or escaping is
    supported.
    """
    line = line.rstrip("\r\n")
    if not line:
        return None

    parts = line.split(delimiter)
    if len(parts) < 2:
        return None
    if len(parts) == 2 and not parts[1]:
        # trailing delimiter with no title after it
        return None

    course_number, title = parts[0], parts[1]

    prerequisites: list[str] = []
    for segment in parts[2:]:
        if segment.startswith(" "):
            segment = segment[1:]
        if segment:
            prerequisites.append(segment)

    return Course(course_number=course_number, title=title, prerequisites=tuple(prerequisites))


class ParsedLines:
    """Iterates parsed courses from raw lines and remembers which lines were skipped."""

    def __init__(self, lines: Iterable[str], delimiter: str = DEFAULT_DELIMITER):
        self._lines = lines
        self.delimiter = delimiter
        self.skipped: list[int] = []  # 1-based line numbers

    def __iter__(self) -> Iterator[Course]:
        for lineno, line in enumerate(self._lines, start=1):
            course = parse_course_line(line, self.delimiter)
            if course is None:
                self.skipped.append(lineno)
                continue
            yield course
