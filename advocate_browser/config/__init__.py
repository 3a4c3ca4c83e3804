from .loader import load_settings
from .model import AppSettings

__all__ = ["AppSettings", "load_settings"]
