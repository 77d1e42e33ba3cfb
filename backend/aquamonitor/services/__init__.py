from aquamonitor.services.authentication import authenticate

__all__ = ["authenticate"]
