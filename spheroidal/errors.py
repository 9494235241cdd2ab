"""Exceptions raised by spheroidal"""

__all__ = ['DomainError']


class DomainError(ValueError):
    """An argument lies outside the numeric range an operation is defined for"""
