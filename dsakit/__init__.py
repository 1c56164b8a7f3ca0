"""Classic data structures and algorithms: arrays, heaps, expressions, lists, queues, trees and graphs."""

__version__ = "0.1.0"