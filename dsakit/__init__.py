"""Classic data structures and algorithms: sorts, searches, stacks, queues, binary trees, search trees and graph algorithms, with interactive menus."""

__version__ = "0.1.0"