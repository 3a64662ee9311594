"""Course planner: courses held in a binary search tree keyed by course number."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

DEFAULT_COURSE_FILE = "CS 300 ABCU_Advising_Program_Input.csv"
_WHITESPACE = " \t\n\r"
_MENU_ENTRIES = (
    "1. Load Data Structure.",
    "2. Print Course List.",
    "3. Print Course.",
    "9. Exit",
)


@dataclass
class Course:
    """A course with its number, title and prerequisite course numbers."""

    course_number: str = ""
    title: str = ""
    prerequisites: list[str] = field(default_factory=list)


@dataclass
class _Node:
    course: Course
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Courses ordered by course number; a repeated number is ignored."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, course: Course) -> None:
        """Add a course unless one with the same number is already present."""
        if self._root is None:
            self._root = _Node(course)
            return
        node = self._root
        key = course.course_number
        while True:
            current = node.course.course_number
            if key < current:
                if node.left is None:
                    node.left = _Node(course)
                    return
                node = node.left
            elif key > current:
                if node.right is None:
                    node.right = _Node(course)
                    return
                node = node.right
            else:
                return

    def search(self, course_number: str) -> Optional[Course]:
        """The course with ``course_number``, or None."""
        node = self._root
        while node is not None:
            current = node.course.course_number
            if course_number == current:
                return node.course
            node = node.left if course_number < current else node.right
        return None

    def __iter__(self) -> Iterator[Course]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def print_all_courses(self) -> None:
        """Print every course in course-number order."""
        print("Here is a sample schedule:")
        print()
        for course in self:
            print(f"{course.course_number}, {course.title}")
        print()


def trim(text: str) -> str:
    """Strip surrounding whitespace; text made only of whitespace is returned as is."""
    stripped = text.strip(_WHITESPACE)
    return stripped if stripped else text


def split(text: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``, trim each piece and drop empty ones."""
    return [token for token in map(trim, text.split(delimiter)) if token]


def load_courses(file_path: str, bst: BinarySearchTree) -> int:
    """Read courses from a file into ``bst``; return how many lines gave a course."""
    try:
        handle = open(file_path, encoding="utf-8")
    except OSError:
        print(f"Error: Could not open file {file_path}")
        return 0

    print(f"Loading data from {file_path}...")
    loaded = 0
    with handle:
        for raw in handle:
            line = raw[:-1] if raw.endswith("\n") else raw
            if not line:
                continue
            tokens = split(line, ",")
            if len(tokens) < 2:
                print(f"Warning: Invalid line format - {line}")
                continue
            number, title, *prerequisites = tokens
            bst.insert(Course(number, title, prerequisites))
            loaded += 1
    print("Data loaded successfully.")
    print()
    return loaded


def format_course(course: Optional[Course]) -> str:
    """Display form of a course, or the not-found message for None."""
    if course is None:
        return "Course not found."
    lines = [f"{course.course_number}, {course.title}"]
    if course.prerequisites:
        lines.append("Prerequisites: " + ", ".join(course.prerequisites))
    return "\n".join(lines)


def _menu_text() -> str:
    """The menu shown before each choice, ending with a blank line."""
    return "\n".join(["Welcome to the course planner.", "", *_MENU_ENTRIES, ""])


def _read_word(prompt: str) -> str:
    """Read the first word of the next non-blank line."""
    words = input(prompt).split()
    while not words:
        words = input().split()
    return words[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the course planner menu."""
    bst = BinarySearchTree()
    print("Welcome to the ABCU Advising Program!")
    print()

    choice = 0
    while choice != 9:
        print(_menu_text())
        try:
            word = _read_word("What would you like to do? ")
        except EOFError:
            break
        try:
            choice = int(word)
        except ValueError:
            print("Invalid input. Please enter a number.")
            print()
            continue

        try:
            if choice == 1:
                file_path = input(
                    "Enter file path [default: CS 300 ABCU_Advising_Program_Input]: "
                )
                load_courses(file_path or DEFAULT_COURSE_FILE, bst)
            elif choice == 2:
                bst.print_all_courses()
            elif choice == 3:
                number = _read_word("What course do you want to know about? ").upper()
                print(format_course(bst.search(number)))
                print()
            elif choice == 9:
                print("Thank you for using the course planner!")
            else:
                print(f"{choice} is not a valid option.")
                print()
        except EOFError:
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())