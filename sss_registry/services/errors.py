"""Errors raised by the applicant record services"""
from typing import Iterable


class RegistryError(Exception):
    """Base class for failures reported back to the request handler"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistryError):
    """One or more submitted values failed validation; nothing was written"""

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        super().__init__(", ".join(self.errors))


class StorageError(RegistryError):
    """The database rejected a statement; the transaction was rolled back"""


class NotFoundError(RegistryError):
    """No applicant exists with the requested id"""

    def __init__(self, applicant_id, message: str = "Record not found"):
        super().__init__(message)
        self.applicant_id = applicant_id
