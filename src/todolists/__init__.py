"""
Todolists - a session-backed todo list manager.

Lists and their todos live in the visitor's session cookie; there is no
database. The modules are split as follows:
- models: Todo and TodoList data types
- session: loading and saving per-visitor state
- validation: name checks and error types
- lists: list and todo mutators
- helpers: display ordering and completion status
- server: the Starlette application
"""

__version__ = "0.1.0"
