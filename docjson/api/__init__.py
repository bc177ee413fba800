
from . import convert, health

routers = [
    convert.router,
    health.router,
]

__all__ = [
    "routers",
]
