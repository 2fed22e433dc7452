from .settings import CodecSettings, LedgersigSettings, RuntimeSettings, get_settings

__all__ = ["CodecSettings", "LedgersigSettings", "RuntimeSettings", "get_settings"]
