"""
Package logger.

All modules log through this loguru logger. It is disabled for the
'delivery' namespace on import; applications opt in with:

    from loguru import logger
    logger.enable('delivery')
"""

from loguru import logger

logger.disable('delivery')

__all__ = ['logger']
