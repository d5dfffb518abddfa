# Routing
from .route_table import ApplicationRouteResolver, RouteTable, build_route_table

__all__ = [
    'ApplicationRouteResolver',
    'RouteTable',
    'build_route_table',
]
