"""Menu-driven console front end for the course catalog.

    1. Load Data Structure.
    2. Print Course List (Alphanumeric).
    3. Print Course Information (Lookup).
    9. Exit.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, TextIO

from config import Config
from services.catalog import CatalogLoadError, CourseCatalog
from utils.formatting import format_course_line, format_prerequisites

EXIT_CHOICE = 9


@dataclass
class ShellState:
    catalog: CourseCatalog = field(default_factory=CourseCatalog)
    data_loaded: bool = False
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> Optional[str]:
        # None on end of input
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


def display_menu(state: ShellState) -> None:
    state.say("\nWhat would you like to do?")
    state.say("  1. Load Data Structure.")
    state.say("  2. Print Course List (Alphanumeric).")
    state.say("  3. Print Course Information (Lookup).")
    state.say("  9. Exit.")


def _require_data(state: ShellState) -> bool:
    if not state.data_loaded:
        state.say("\nError: Please load the data structure first (Option 1).")
        return False
    return True


def handle_load(state: ShellState) -> None:
    filename = state.ask("\nEnter the filename containing the course data (e.g., ABCU_Input.csv): ")
    if filename is None:
        return
    filename = filename.strip()

    try:
        state.catalog.load(filename)
    except CatalogLoadError:
        state.say(f"\nError: Could not open file {filename}. Please check the file name and path.")
        return

    state.data_loaded = True
    state.say("\nCourse data loaded successfully.")


def handle_list(state: ShellState) -> None:
    if not _require_data(state):
        return

    state.say("\nHere is a list of all courses (alphanumeric order):")
    courses = state.catalog.list_courses()
    if not courses:
        state.say("The course catalog is empty.")
        return
    for course in courses:
        state.say(format_course_line(course))


def handle_lookup(state: ShellState) -> None:
    if not _require_data(state):
        return

    course_number = state.ask("\nWhat course number do you want to know about (e.g., MATH200)? ")
    if course_number is None:
        return

    course = state.catalog.lookup(course_number)
    if course is None:
        state.say(f"\nCourse not found: {course_number}")
        return

    state.say("\n" + format_course_line(course))
    state.say(f"Prerequisites: {format_prerequisites(course)}")


HANDLERS: Dict[int, Callable[[ShellState], None]] = {
    1: handle_load,
    2: handle_list,
    3: handle_lookup,
}


def run(state: ShellState) -> int:
    state.say("Welcome to the course planner!")

    while True:
        display_menu(state)
        raw = state.ask("\nEnter your choice (1, 2, 3, or 9): ")
        if raw is None:
            break

        try:
            choice = int(raw.strip())
        except ValueError:
            state.say("Input error. Please enter a valid menu number (1, 2, 3, or 9).")
            continue

        if choice == EXIT_CHOICE:
            state.say("\nThank you for using the course planner!")
            break

        handler = HANDLERS.get(choice)
        if handler is None:
            state.say(f"\n{choice} is not a valid option. Please choose 1, 2, 3, or 9.")
            continue
        handler(state)

    return 0


def main() -> int:
    logging.basicConfig(level=Config.LOG_LEVEL, stream=sys.stderr)
    state = ShellState(catalog=CourseCatalog(delimiter=Config.CATALOG_DELIMITER))
    return run(state)


if __name__ == "__main__":
    sys.exit(main())
