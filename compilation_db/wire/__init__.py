"""JSON wire format of the compilation database.

WHY: Keeps everything that knows about the on-disk shape in one place,
apart from the domain model and from file I/O.

HOW: records.py defines the two record shapes and schema validation,
codec.py converts between them and Entry.
"""
