"""
Repositories grouping the CoinMarketCap endpoints by domain.
"""

from .base import Repository, convert_params, is_numeric
from .cex import CexRepository
from .community import CommunityRepository
from .crypto import CryptoRepository
from .dex import DexRepository
from .metric import MetricRepository
from .misc import MiscRepository

__all__ = [
    "CexRepository",
    "CommunityRepository",
    "CryptoRepository",
    "DexRepository",
    "MetricRepository",
    "MiscRepository",
    "Repository",
    "convert_params",
    "is_numeric",
]
