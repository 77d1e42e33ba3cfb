from aquamonitor.api.routes import router

__all__ = ["router"]
