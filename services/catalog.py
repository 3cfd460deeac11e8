from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Optional, Union

from models.course import Course
from services.catalog_tree import CatalogTree
from utils.record_parser import DEFAULT_DELIMITER, ParsedLines

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", IO[str]]


class CatalogLoadError(OSError):
    """The catalog source could not be opened or read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Could not load course catalog from {source}: {reason}")
        self.source = source
        self.reason = reason


@dataclass(frozen=True)
class LoadResult:
    loaded: int
    skipped: int


class CourseCatalog:
    """Load / list / lookup over a CatalogTree.

    An empty catalog is a normal, queryable state. Nothing here is thread-safe;
    callers sharing one catalog across threads must hold a single lock around
    every call (see extensions.CatalogStore).
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        self.delimiter = delimiter
        self._tree = CatalogTree()

    def insert(self, course: Course) -> None:
        self._tree.insert(course)

    def load(self, source: Source) -> LoadResult:
        """Parse every line of `source` and insert the courses it describes.

        `source` is a filesystem path or an open text stream. Malformed lines are
        skipped. If the source can't be read, CatalogLoadError is raised and any
        courses inserted before the failure stay in the catalog.
        """
        if isinstance(source, (str, os.PathLike)):
            name = str(Path(source))
        else:
            name = str(getattr(source, "name", None) or "<stream>")

        try:
            if isinstance(source, (str, os.PathLike)):
                with Path(source).open("r", encoding="utf-8", newline="") as fh:
                    return self._load_stream(fh, name)
            return self._load_stream(source, name)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("catalog load failed for %s: %s", name, e)
            reason = getattr(e, "strerror", None) or str(e)
            raise CatalogLoadError(name, reason) from e

    def _load_stream(self, stream: IO[str], name: str) -> LoadResult:
        parsed = ParsedLines(stream, self.delimiter)
        loaded = 0
        for course in parsed:
            self._tree.insert(course)
            loaded += 1

        for lineno in parsed.skipped:
            logger.debug("%s:%d skipped (fewer than two fields)", name, lineno)
        logger.info("loaded %d courses from %s (%d lines skipped)", loaded, name, len(parsed.skipped))
        return LoadResult(loaded=loaded, skipped=len(parsed.skipped))

    def list_courses(self) -> List[Course]:
        return list(self._tree.traverse())

    def lookup(self, course_number: str) -> Optional[Course]:
        return self._tree.search(course_number)

    def height(self) -> int:
        return self._tree.height()

    def is_empty(self) -> bool:
        return self._tree.is_empty()

    def __len__(self) -> int:
        return len(self._tree)
