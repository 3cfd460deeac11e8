import os


# Absolute path to project root
# (a stable anchor for all file paths)
basedir = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Course file: one record per line, <number>,<title>[,<prereq>...]
    CATALOG_DIR = os.path.join(basedir, "data_catalog")
    CATALOG_PATH = os.environ.get(
        "COURSE_CATALOG_PATH", os.path.join(CATALOG_DIR, "courses.csv")
    )
    CATALOG_DELIMITER = ","

    # Load CATALOG_PATH when the app starts instead of waiting for POST /catalog/load
    CATALOG_AUTOLOAD = _env_flag("COURSE_CATALOG_AUTOLOAD")

    LOG_LEVEL = os.environ.get("COURSE_CATALOG_LOG_LEVEL", "INFO")
