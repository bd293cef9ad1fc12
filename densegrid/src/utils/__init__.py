from .parsing import parse_int, parse_ints
from .logger import get_logger

__all__ = ["parse_int", "parse_ints", "get_logger"]
