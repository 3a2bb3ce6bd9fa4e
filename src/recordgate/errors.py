"""Exceptions raised by gateways and accessors."""


class RecordGateError(Exception):
    """Base exception for recordgate"""
    pass


class InvalidStateError(RecordGateError):
    """A record's identifier does not allow the requested operation"""
    pass


class QueryError(RecordGateError):
    """A read operation failed"""
    pass
