"""
Local command-line task tracker.

Subpackages:
- tasks: data model, JSON file store and due-date helpers
- cli: argument grammar, command handler and process entrypoint
"""

__version__ = "0.1.0"
