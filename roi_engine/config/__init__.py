from .settings import DEFAULT_NAMESPACE, Settings, get_settings

__all__ = ["DEFAULT_NAMESPACE", "Settings", "get_settings"]
