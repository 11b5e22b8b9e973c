"""
Resource loader adapters for asset preloading.
"""

from checkgate.infrastructure.loaders.http import (
    HttpResourceLoader,
    HttpResourceLoaderConfig,
)
from checkgate.infrastructure.loaders.mock import MockResourceLoader

__all__ = [
    "HttpResourceLoader",
    "HttpResourceLoaderConfig",
    "MockResourceLoader",
]
