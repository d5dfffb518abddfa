"""
Unit tests for route resolvers.
"""
import pytest
from fastapi import APIRouter

from songpool.application.serialization import ResourceRegistry, default_registry
from songpool.config import AppSettings
from songpool.domain.entities import Song
from songpool.domain.exceptions import RouteNotFoundError
from songpool.infrastructure.routing import (
    ApplicationRouteResolver,
    RouteTable,
    build_route_table,
)


class TestRouteTable:

    def test_resolve_static_route(self, route_table):
        assert route_table.resolve("api_get_all_song") == "/api/songs"

    def test_resolve_with_params(self, route_table):
        assert route_table.resolve("api_get_song", {"id": 42}) == "/api/songs/42"

    def test_unknown_route(self, route_table):
        with pytest.raises(RouteNotFoundError) as exc_info:
            route_table.resolve("api_get_album", {"id": 1})

        error = exc_info.value
        assert error.route_name == "api_get_album"
        assert error.to_dict() == {
            "error": "ROUTE_NOT_FOUND",
            "message": "Route 'api_get_album' does not exist",
            "details": {"route_name": "api_get_album", "params": {"id": "1"}},
        }

    def test_missing_parameter(self, route_table):
        with pytest.raises(RouteNotFoundError) as exc_info:
            route_table.resolve("api_get_song")
        assert "id" in exc_info.value.message

    def test_extra_params_become_query_string(self, route_table):
        path = route_table.resolve("api_get_all_song", {"page": 2, "q": "a b"})
        assert path == "/api/songs?page=2&q=a+b"

    def test_params_are_quoted(self):
        table = RouteTable({"api_get_tag": "/api/tags/{name}"})
        assert table.resolve("api_get_tag", {"name": "rock/pop"}) == "/api/tags/rock%2Fpop"

    def test_add_resource(self):
        table = RouteTable()
        table.add_resource("song_album", "/api/v1/song_album/")
        assert table.has_route("api_get_all_song_album")
        assert table.resolve("api_get_song_album", {"id": 3}) == "/api/v1/song_album/3"


class TestBuildRouteTable:

    def test_routes_for_registered_resources(self):
        table = build_route_table(default_registry(), AppSettings())

        assert table.resolve("api_get_all_song") == "/api/v1/song"
        assert table.resolve("api_get_pool", {"id": 2}) == "/api/v1/pool/2"
        assert table.resolve("api_get_user", {"id": 3}) == "/api/v1/user/3"

    def test_uses_prefix_and_version(self):
        registry = ResourceRegistry()
        registry.register(Song, token="track")
        settings = AppSettings(api_prefix="/music/", api_version="v2")

        table = build_route_table(registry, settings)

        assert sorted(table.names) == ["api_get_all_track", "api_get_track"]
        assert table.resolve("api_get_track", {"id": 1}) == "/music/v2/track/1"


class TestApplicationRouteResolver:

    @pytest.fixture
    def resolver(self):
        router = APIRouter(prefix="/api/v1")

        async def list_songs():
            return []

        async def get_song(id: int):
            return {}

        router.add_api_route("/song", list_songs, name="api_get_all_song")
        router.add_api_route("/song/{id}", get_song, name="api_get_song")
        return ApplicationRouteResolver(router)

    def test_resolves_app_routes(self, resolver):
        assert resolver.resolve("api_get_all_song") == "/api/v1/song"
        assert resolver.resolve("api_get_song", {"id": 42}) == "/api/v1/song/42"

    def test_has_route(self, resolver):
        assert resolver.has_route("api_get_song")
        assert not resolver.has_route("api_get_pool")

    def test_unknown_route_translated(self, resolver):
        with pytest.raises(RouteNotFoundError):
            resolver.resolve("api_get_pool", {"id": 1})

    def test_serializer_with_app_routes(self, resolver, registry):
        from songpool.application.serialization import build_serializer
        from tests.factories import SongFactory

        data = build_serializer(resolver, registry).normalize(SongFactory(id=5), "json")

        assert data["_links"]["self"]["path"] == "/api/v1/song/5"
