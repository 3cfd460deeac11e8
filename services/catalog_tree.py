from __future__ import annotations

from typing import Iterator, Optional

from models.course import Course


class _Node:
    __slots__ = ("course", "left", "right")

    def __init__(self, course: Course):
        self.course = course
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class CatalogTree:
    """Unbalanced binary search tree of courses keyed by course_number.

    Keys are compared as plain strings. Insertion never checks for duplicates:
    an equal key is sent to the right subtree, so search always stops at the
    first-inserted node and later duplicates can't be reached by lookup.

    Walks are iterative. Catalog files are often already sorted, which turns
    the tree into a linked list, and recursion would then be bounded by the
    interpreter's recursion limit instead of by memory.
    """

    def __init__(self):
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, course: Course) -> None:
        node = _Node(course)
        self._size += 1

        if self._root is None:
            self._root = node
            return

        key = course.course_number
        current = self._root
        while True:
            if key < current.course.course_number:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                # equal or greater goes right
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def search(self, course_number: str) -> Optional[Course]:
        current = self._root
        while current is not None:
            key = current.course.course_number
            if course_number == key:
                return current.course
            current = current.left if course_number < key else current.right
        return None

    def traverse(self) -> Iterator[Course]:
        """Yield courses in ascending key order (left, node, right)."""
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.course
            current = current.right

    def height(self) -> int:
        # number of nodes on the longest root-to-leaf path; 0 when empty
        if self._root is None:
            return 0
        best = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Course]:
        return self.traverse()

    def __contains__(self, course_number: object) -> bool:
        return isinstance(course_number, str) and self.search(course_number) is not None
