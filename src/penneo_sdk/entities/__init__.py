"""
Resource façades for Penneo Python SDK
"""

from .casefile import CaseFiles

__all__ = [
    'CaseFiles',
]
