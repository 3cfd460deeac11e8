import sys
from pathlib import Path

from config import Config
from services.catalog import CatalogLoadError, CourseCatalog

if __name__ == "__main__":
    path = Path(sys.argv[1] if len(sys.argv) > 1 else Config.CATALOG_PATH)
    print("CATALOG_PATH:", path.resolve())

    catalog = CourseCatalog(delimiter=Config.CATALOG_DELIMITER)
    try:
        result = catalog.load(path)
    except CatalogLoadError as e:
        print("Load failed:", e)
        sys.exit(1)

    print("Courses loaded:", result.loaded)
    print("Lines skipped:", result.skipped)

    # A height close to the course count means the file was (nearly) sorted
    # and lookups degrade to a linear scan.
    print("Tree height:", catalog.height())

    courses = catalog.list_courses()
    if courses:
        print("First course:", courses[0])
        print("Last course:", courses[-1])
    no_prereq = [c for c in courses if not c.prerequisites]
    print("Courses without prerequisites:", len(no_prereq))
