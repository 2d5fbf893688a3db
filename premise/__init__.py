"""
Premise
=======

Generic CRUD repositories over SQLAlchemy sessions, with an auditing
variant and a few presentation helpers.
"""

__version__ = "0.1.0"
