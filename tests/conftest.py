import pytest

from app import create_app
from models.course import Course
from services.catalog import CourseCatalog


SAMPLE_LINES = [
    "MATH201,Discrete Mathematics",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
    "CSCI101,Introduction to Programming in C++,CSCI100",
    "CSCI100,Introduction to Computer Science",
    "CSCI200,Data Structures,CSCI101",
]


@pytest.fixture
def course_file(tmp_path):
    """Small catalog file written to a temp dir."""
    path = tmp_path / "courses.csv"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def catalog(course_file):
    c = CourseCatalog()
    c.load(course_file)
    return c


@pytest.fixture
def make_course():
    def _make(number, title="", prerequisites=()):
        return Course(course_number=number, title=title, prerequisites=tuple(prerequisites))
    return _make


@pytest.fixture
def app(course_file):
    return create_app(overrides={
        "TESTING": True,
        "CATALOG_DIR": str(course_file.parent),
        "CATALOG_PATH": str(course_file),
    })


@pytest.fixture
def client(app):
    return app.test_client()
