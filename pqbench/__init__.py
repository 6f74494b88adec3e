"""Priority queues on a binary max-heap and a sorted linked list, with a stopwatch, data helpers and a timing benchmark."""

__version__ = "0.1.0"