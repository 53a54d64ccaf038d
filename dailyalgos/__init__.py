"""Classic algorithms on sequences, strings and singly linked lists, with a demo command."""

__version__ = "0.1.0"
__all__ = ["cli", "linked_list", "sequences"]