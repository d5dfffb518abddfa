"""
songpool - backend core for the Song/Pool/User API.

Entity lifecycle metadata, persistence hooks and HATEOAS serialization.
"""
__version__ = "0.1.0"
