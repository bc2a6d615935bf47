from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .places.client import PlaceSearchClient
from .places.config import PlaceSearchConfig, load_place_search_config
from .recommendations.aggregator import RestaurantAggregator
from .recommendations.config import RecommendationConfig
from .recommendations.selector import RecommendationSelector
from .storage.config import StorageConfig
from .storage.store import PersistenceStore

logger = logging.getLogger(__name__)


@dataclass
class Services:
    client: PlaceSearchClient | None
    aggregator: RestaurantAggregator
    selector: RecommendationSelector
    store: PersistenceStore
    recommendation_config: RecommendationConfig

    async def aclose(self) -> None:
        if self.client is not None:
            await self.client.aclose()


def build_services(
    place_config: PlaceSearchConfig | None = None,
    storage_config: StorageConfig | None = None,
    recommendation_config: RecommendationConfig | None = None,
) -> Services:
    """
    Wire the client, aggregator, store and selector together.

    Without an explicit ``place_config`` the API key is read from the
    environment, which raises ``ConfigError`` when it is missing.
    """
    place_config = place_config or load_place_search_config()
    storage_config = storage_config or StorageConfig.from_env()
    recommendation_config = recommendation_config or RecommendationConfig.from_env()

    client = PlaceSearchClient(place_config)
    aggregator = RestaurantAggregator(client, attach_menus=recommendation_config.attach_menus)
    store = PersistenceStore(storage_config)
    selector = RecommendationSelector(
        aggregator,
        store,
        rng=random.Random(recommendation_config.seed),
        default_radius=recommendation_config.default_radius,
    )
    logger.info("Services ready (data dir: %s)", storage_config.data_dir.resolve())
    return Services(
        client=client,
        aggregator=aggregator,
        selector=selector,
        store=store,
        recommendation_config=recommendation_config,
    )
