# AGPL-3.0 License

"""
Toolkit for grading student programming assignments.
"""

__version__ = "1.0.0"
