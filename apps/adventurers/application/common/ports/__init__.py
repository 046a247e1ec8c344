"""Common Ports."""

from apps.adventurers.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
