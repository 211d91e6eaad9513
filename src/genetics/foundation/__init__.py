"""Foundation layer: exceptions, logging and version helpers."""

from . import exceptions
from .logging import configure_genetics_logging
from .version import get_version

__all__ = ["exceptions", "configure_genetics_logging", "get_version"]
