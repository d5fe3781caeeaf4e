"""
Diagnostics Module
==================
Out-of-band quality signals for extracted documents.
"""

from .yield_check import YieldConfig, YieldReport, check_yield

__all__ = ['YieldConfig', 'YieldReport', 'check_yield']
