from .config import configclass
from .helper import generate_or_use_handle

__all__ = ["configclass", "generate_or_use_handle"]
