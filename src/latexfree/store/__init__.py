"""Submission stores.

Two interchangeable backends implement the same contract:
- SqlSubmissionStore: SQLAlchemy over SQLite
- JsonFileSubmissionStore: a single JSON document on disk
"""

from latexfree.store.base import SubmissionChanges, SubmissionInput, SubmissionStore
from latexfree.store.json_file import JsonFileSubmissionStore
from latexfree.store.sql import SqlSubmissionStore

__all__ = [
    "JsonFileSubmissionStore",
    "SqlSubmissionStore",
    "SubmissionChanges",
    "SubmissionInput",
    "SubmissionStore",
]
