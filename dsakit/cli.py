"""Interactive menus for the stack, queues and binary search tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TextIO

from dsakit.bst import BinarySearchTree
from dsakit.circular import CircularQueue, LinkedCircularQueue
from dsakit.fifo import ArrayQueue
from dsakit.stack import Overflow, Stack, Underflow

_EXIT_OPTION = 6


class _Input:
    """Whitespace-separated integer tokens read from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._tokens: Iterator[str] = (
            token for line in stream for token in line.split()
        )

    def read_int(self) -> int:
        """Return the next integer; raise EOFError when input is exhausted."""
        token = next(self._tokens, None)
        if token is None:
            raise EOFError("end of input")
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def _run_menu(
    stdout: TextIO,
    reader: _Input,
    banner: str,
    prompt: str,
    actions: dict[int, Callable[[], None]],
) -> None:
    """Show the menu until the exit option is chosen or input runs out."""
    try:
        while True:
            stdout.write(banner + "\n")
            stdout.write(prompt)
            option = reader.read_int()
            if option == _EXIT_OPTION:
                return
            action = actions.get(option)
            if action is not None:
                action()
    except EOFError:
        return


def _values_line(label: str, values: Iterable[Any]) -> str:
    return label + "".join(f"{value} " for value in values) + "\n"


def run_stack_menu(stdin: Iterable[str], stdout: TextIO) -> None:
    """Drive a ten-slot stack from menu choices read from ``stdin``."""
    reader = _Input(stdin)
    stack = Stack(10)

    def report_empty() -> None:
        stdout.write("Stack is empty.\n" if stack.is_empty() else "Stack is not empty.\n")

    def push() -> None:
        stdout.write("Enter element : ")
        value = reader.read_int()
        try:
            stack.push(value)
        except Overflow:
            stdout.write("Stack is overflow.\n")
        else:
            stdout.write("Successfully pushed.\n")

    def pop() -> None:
        try:
            stdout.write(f"Popped value = {stack.pop()}\n")
        except Underflow:
            stdout.write("Stack is underflow.\n")

    def display() -> None:
        if stack.is_empty():
            report_empty()
        else:
            stdout.write(_values_line("Elements of the stack are : ", stack))

    def peek() -> None:
        try:
            stdout.write(f"Peek value = {stack.peek()}\n")
        except Underflow:
            stdout.write("Stack is underflow.\n")

    _run_menu(
        stdout,
        reader,
        "1.Push 2.Pop 3.Display 4.Is Empty 5.Peek 6.Exit",
        "Enter your option : ",
        {1: push, 2: pop, 3: display, 4: report_empty, 5: peek},
    )


def run_queue_menu(stdin: Iterable[str], stdout: TextIO) -> None:
    """Drive a hundred-slot array queue from menu choices read from ``stdin``."""
    reader = _Input(stdin)
    queue = ArrayQueue(100)

    def enqueue() -> None:
        stdout.write("Enter element : ")
        value = reader.read_int()
        try:
            queue.enqueue(value)
        except Overflow:
            stdout.write("Queue Overflow.\n")
        else:
            stdout.write("Successfully inserted.\n")

    def dequeue() -> None:
        try:
            stdout.write(f"Deleted element = {queue.dequeue()}\n")
        except Underflow:
            stdout.write("Queue is underflow.\n")

    def display() -> None:
        if queue.is_empty():
            stdout.write("Queue is empty.\n")
        else:
            stdout.write(_values_line("Elements in the queue : ", queue))

    def report_empty() -> None:
        stdout.write("Queue is empty.\n" if queue.is_empty() else "Queue is not empty.\n")

    def size() -> None:
        stdout.write(f"Queue size : {len(queue)}\n")

    _run_menu(
        stdout,
        reader,
        "1.Enqueue 2.Dequeue 3.Display 4.Is Empty 5.Size 6.Exit",
        "Enter your option : ",
        {1: enqueue, 2: dequeue, 3: display, 4: report_empty, 5: size},
    )


def run_circular_queue_menu(
    stdin: Iterable[str], stdout: TextIO, linked: bool = False
) -> None:
    """Drive a circular queue from menu choices read from ``stdin``.

    With ``linked`` the queue is an unbounded circular linked list,
    otherwise a five-slot ring buffer.
    """
    reader = _Input(stdin)
    queue: CircularQueue | LinkedCircularQueue = (
        LinkedCircularQueue() if linked else CircularQueue(5)
    )
    deleted_label = "Deleted value" if linked else "Deleted element"

    def enqueue() -> None:
        stdout.write("Enter element : ")
        value = reader.read_int()
        try:
            queue.enqueue(value)
        except Overflow:
            stdout.write("Circular queue is overflow.\n")
        else:
            stdout.write("Successfully inserted.\n")

    def dequeue() -> None:
        try:
            stdout.write(f"{deleted_label} = {queue.dequeue()}\n")
        except Underflow:
            stdout.write("Circular queue is underflow.\n")

    def display() -> None:
        if queue.is_empty():
            stdout.write("Circular queue is empty.\n")
        else:
            stdout.write(_values_line("Elements in the circular queue : ", queue))

    def report_empty() -> None:
        stdout.write(
            "Circular queue is empty.\n"
            if queue.is_empty()
            else "Circular queue is not empty.\n"
        )

    def size() -> None:
        stdout.write(f"Circular queue size : {len(queue)}\n")

    _run_menu(
        stdout,
        reader,
        "1.Enqueue 2.Dequeue 3.Display 4.Is empty 5.Size 6.Exit",
        "Enter your option : ",
        {1: enqueue, 2: dequeue, 3: display, 4: report_empty, 5: size},
    )


def run_bst_menu(stdin: Iterable[str], stdout: TextIO) -> None:
    """Drive a binary search tree from menu choices read from ``stdin``."""
    reader = _Input(stdin)
    tree = BinarySearchTree()

    def insert() -> None:
        stdout.write("Enter an element to be inserted : ")
        value = reader.read_int()
        if tree.insert(value):
            stdout.write("Successfully inserted.\n")
        else:
            stdout.write("Element exists in BST.\n")

    def traversal(name: str, walk: Callable[[], list[Any]]) -> Callable[[], None]:
        def show() -> None:
            if tree.is_empty():
                stdout.write("Binary Search Tree is empty.\n")
            else:
                stdout.write(
                    _values_line(f"Elements of the BST ({name} traversal): ", walk())
                )

        return show

    def search() -> None:
        stdout.write("Enter an element to be searched : ")
        value = reader.read_int()
        if value in tree:
            stdout.write("Element found in the binary search tree.\n")
        else:
            stdout.write("Element not found in the binary search tree.\n")

    _run_menu(
        stdout,
        reader,
        "1.Insert 2.Inorder Traversal 3.Preorder Traversal "
        "4.Postorder Traversal 5.Search an element 6.Exit",
        "Enter your option: ",
        {
            1: insert,
            2: traversal("in-order", tree.inorder),
            3: traversal("pre-order", tree.preorder),
            4: traversal("post-order", tree.postorder),
            5: search,
        },
    )


def main(argv: list[str] | None = None) -> int:
    """Run the menu named on the command line against standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Interactive data structure menus."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("stack", help="bounded stack")
    commands.add_parser("queue", help="array queue")
    circular = commands.add_parser("circular-queue", help="circular queue")
    circular.add_argument(
        "--linked", action="store_true", help="use the circular linked list"
    )
    commands.add_parser("bst", help="binary search tree")
    args = parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    try:
        if args.command == "stack":
            run_stack_menu(stdin, stdout)
        elif args.command == "queue":
            run_queue_menu(stdin, stdout)
        elif args.command == "circular-queue":
            run_circular_queue_menu(stdin, stdout, args.linked)
        else:
            run_bst_menu(stdin, stdout)
    except ValueError as error:
        sys.stderr.write(f"dsakit: {error}\n")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())