from __future__ import annotations

import logging


def configure_genetics_logging(*, level: int = logging.INFO) -> None:
    """
    Configure a minimal console logger for the genetics package.

    Notes:
        - This is intentionally opt-in (library code must not call logging.basicConfig()).
        - The handler is only attached if neither the root logger nor the "genetics" logger has handlers.
    """
    root = logging.getLogger()
    genetics_logger = logging.getLogger("genetics")

    # If the user already configured logging, don't interfere.
    if root.handlers or genetics_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    genetics_logger.addHandler(handler)
    genetics_logger.setLevel(level)
    genetics_logger.propagate = False


__all__ = ["configure_genetics_logging"]
