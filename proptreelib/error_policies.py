"""
Error handling policies for PropTreeLib.

Failures while reading a single member are always absorbed by the builder and
turned into an access-error node. A policy decides what else happens with the
failure: report it, record it for later inspection, or both.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import sys


class ErrorPolicy(ABC):
    """
    Base class for access error policies.

    Subclasses implement different strategies for reporting errors raised
    while a member of a container is being read.
    """

    @abstractmethod
    def handle(self, error: BaseException, label: str, container: Any) -> None:
        """
        Handle an error raised while reading a member.

        Args:
            error: The exception that was raised
            label: Label of the member being read (key or ``[index]``)
            container: The object whose member failed
        """
        pass


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that records errors and warns on stderr.

    This is the default policy. Errors are collected for later inspection
    and, when verbose, each one is reported as it happens.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.verbose = verbose

    def handle(self, error: BaseException, label: str, container: Any) -> None:
        self.errors.append(_error_record(error, label, container))

        if self.verbose:
            print(
                f"WARNING: Error accessing '{label}' on {type(container).__name__}: "
                f"{type(error).__name__}: {error}",
                file=sys.stderr
            )

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        by_type: Dict[str, int] = {}
        for record in self.errors:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1
        return {
            'total_errors': len(self.errors),
            'by_type': by_type,
            'errors': self.errors
        }


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without output.

    Useful when the rendered tree already shows the failures and the details
    are inspected separately.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []

    def handle(self, error: BaseException, label: str, container: Any) -> None:
        """Silently collect the error."""
        self.errors.append(_error_record(error, label, container))


def _error_record(error: BaseException, label: str, container: Any) -> Dict[str, Any]:
    return {
        'label': label,
        'container_type': type(container).__name__,
        'error': error,
        'error_type': type(error).__name__,
        'error_message': str(error)
    }
