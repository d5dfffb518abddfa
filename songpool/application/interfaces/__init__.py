# Application Interfaces (ports)
from .repositories import Repository
from .routing import RouteResolver

__all__ = ['Repository', 'RouteResolver']
