"""
Column Detection Module
=======================
Single- vs two-column classification by horizontal gap analysis.
"""

from .detector import ColumnDetector, ColumnConfig, detect_column_boundary

__all__ = ['ColumnDetector', 'ColumnConfig', 'detect_column_boundary']
