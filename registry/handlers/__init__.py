"""
Handlers package - exports the web routes
"""
from . import authorization
from . import trigger
from .trigger import routes

__all__ = [
    'authorization',
    'trigger',
    'routes'
]
