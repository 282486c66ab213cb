from .demo import router as demo_router

_routers = [demo_router]

__all__ = ["get_routers"]


def get_routers():
    return _routers
