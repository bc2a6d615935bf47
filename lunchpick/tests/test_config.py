import pytest

from lunchpick.errors import ConfigError
from lunchpick.places.config import API_KEY_ENV, PlaceSearchConfig, load_place_search_config
from lunchpick.recommendations.config import RecommendationConfig
from lunchpick.services import build_services
from lunchpick.storage.config import StorageConfig


def test_missing_api_key_raises_config_error(monkeypatch):
    monkeypatch.setenv(API_KEY_ENV, "")
    with pytest.raises(ConfigError):
        load_place_search_config()


def test_api_key_is_read_from_environment(monkeypatch):
    monkeypatch.setenv(API_KEY_ENV, " secret ")
    config = load_place_search_config()
    assert config.api_key == "secret"
    assert config.authorization == "KakaoAK secret"


def test_build_services_without_key_fails(monkeypatch):
    monkeypatch.setenv(API_KEY_ENV, "")
    with pytest.raises(ConfigError):
        build_services()


@pytest.mark.asyncio
async def test_build_services_wires_components(tmp_path):
    services = build_services(
        PlaceSearchConfig(api_key="k"),
        StorageConfig(data_dir=tmp_path),
        RecommendationConfig(default_radius=500, seed=1),
    )
    try:
        assert services.selector.default_radius == 500
        assert services.selector.store is services.store
        assert services.aggregator.client is services.client
        assert services.aggregator.attach_menus is True
    finally:
        await services.aclose()


def test_recommendation_config_from_env(monkeypatch):
    monkeypatch.setenv("LUNCHPICK_DEFAULT_RADIUS", "1500")
    monkeypatch.setenv("LUNCHPICK_ATTACH_MENUS", "false")
    monkeypatch.setenv("LUNCHPICK_SEED", "9")
    config = RecommendationConfig.from_env()
    assert config.default_radius == 1500
    assert config.attach_menus is False
    assert config.seed == 9


def test_dotenv_is_loaded_in_one_place():
    import lunchpick.config
    import lunchpick.places.config

    assert "load_dotenv" not in vars(lunchpick.config)
    assert "load_dotenv" in vars(lunchpick.places.config)
