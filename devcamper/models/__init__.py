"""
Persistence models.
"""

from devcamper.models.bootcamp import Bootcamp

__all__ = ["Bootcamp"]
