"""
Page Model Module
=================
Line grouping for one column of positioned runs.
"""

from .model import Line, group_lines, assemble_lines

__all__ = ['Line', 'group_lines', 'assemble_lines']
