from __future__ import annotations

from models.course import Course


def format_course_line(course: Course) -> str:
    return f"{course.course_number}, {course.title}"


def format_prerequisites(course: Course) -> str:
    # "None" is what the menu shows for a course without prerequisites
    if not course.prerequisites:
        return "None"
    return ", ".join(course.prerequisites)
