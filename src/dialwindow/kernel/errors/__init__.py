"""Kernel error hierarchy.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ApplicationError     (application.py)
        └── ConfigError      (dialwindow.config.validation)

The resolver, evaluator and calculator never raise for unresolvable numbers
or degenerate windows; those outcomes are returned as data.
"""

from dialwindow.kernel.errors.application import ApplicationError
from dialwindow.kernel.errors.base import BaseError
from dialwindow.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
