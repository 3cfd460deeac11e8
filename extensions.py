from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from flask import Flask, current_app

from services.catalog import CatalogLoadError, CourseCatalog


class CatalogStore:
    """Flask extension holding one CourseCatalog per app.

    The catalog has no internal locking and Flask serves requests on several
    threads, so every access goes through `session()`, which holds one lock
    for the whole operation.
    """

    def __init__(self, app: Optional[Flask] = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        catalog = CourseCatalog(delimiter=app.config.get("CATALOG_DELIMITER", ","))
        app.extensions["course_catalog"] = {
            "catalog": catalog,
            "lock": threading.Lock(),
        }

        if app.config.get("CATALOG_AUTOLOAD"):
            path = app.config.get("CATALOG_PATH")
            try:
                result = catalog.load(path)
                app.logger.info("autoloaded %d courses from %s", result.loaded, path)
            except CatalogLoadError as e:
                # The app still starts; POST /catalog/load can retry later
                app.logger.warning("autoload skipped: %s", e)

    @contextmanager
    def session(self, app: Optional[Flask] = None) -> Iterator[CourseCatalog]:
        state = (app or current_app).extensions["course_catalog"]
        with state["lock"]:
            yield state["catalog"]


catalog_store = CatalogStore()
