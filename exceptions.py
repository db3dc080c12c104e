"""Errors raised by the crime explorer."""


class CrimeAppException(Exception):
    """Base Exception Class"""
    pass
class DataLoadError(CrimeAppException):
    """Error for when the crime CSV is missing, unreadable or lacks required columns"""
    pass
