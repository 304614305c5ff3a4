"""
Voter registration report publisher.
"""

__version__ = "1.0.0"
