"""
staledocs - detects docstrings whose documented arguments drifted from the signature.
"""

__version__ = "0.1.0"
