"""
Entry point of the CoinMarketCap client.

Usage:
    from coinmarketcap import CoinMarketCapApi

    cmc = CoinMarketCapApi(api_key)
    fiats = cmc.misc.fiats(limit=10).data

    # Sandbox host with the shared sandbox key
    cmc = CoinMarketCapApi.for_sandbox()
"""

from api.client import Client
from repositories import (
    CexRepository,
    CommunityRepository,
    CryptoRepository,
    DexRepository,
    MetricRepository,
    MiscRepository,
)


class CoinMarketCapApi:
    """
    CoinMarketCap API grouped by domain.

    Attributes:
        client: Client issuing the HTTP requests
        crypto: Cryptocurrency endpoints
        dex: Decentralized exchange endpoints
        cex: Centralized exchange endpoints
        metric: Global metrics and indices
        community: Community content and trends
        misc: Tools, fiat and API key endpoints
    """

    def __init__(self, api_key: str | None = None, client: Client | None = None):
        """
        Initialize the API.

        Args:
            api_key: CoinMarketCap API key
            client: Preconfigured client (a new production client by default)
        """
        self.client = client or Client()
        if api_key:
            self.client.set_api_key(api_key)

        self.crypto = CryptoRepository(self)
        self.dex = DexRepository(self)
        self.cex = CexRepository(self)
        self.metric = MetricRepository(self)
        self.community = CommunityRepository(self)
        self.misc = MiscRepository(self)

    def sandbox(self) -> "CoinMarketCapApi":
        """Switch this instance to the sandbox host and key."""
        self.client.sandbox()
        return self

    @classmethod
    def for_sandbox(cls) -> "CoinMarketCapApi":
        """Create a new instance bound to the sandbox host and key."""
        return cls().sandbox()
