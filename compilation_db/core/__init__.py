"""Domain model, format options and the shellword codec.

WHY: These are the pieces every other layer depends on and none of them
touch the file system.

HOW: entry.py defines Entry and the Entries set, format.py the
DatabaseFormat options, shellwords.py the join/split codec and
errors.py the exception hierarchy.

RULES:
- Nothing in core performs I/O
- Nothing in core knows about the JSON wire shapes
"""
