"""
Domain Interfaces (Ports)
"""

from .repositories import CustomerRepository, CreditRepository

__all__ = [
    "CustomerRepository",
    "CreditRepository",
]
