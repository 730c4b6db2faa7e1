"""
Tests for the Redis cache wrapper and client lifecycle.
"""

from unittest.mock import MagicMock, patch

import pytest
import redis

from cache import redis_cache
from cache.redis_cache import CacheLookup, RedisCache


class TestRedisCache:
    """Tests for RedisCache get/set/delete."""

    @pytest.fixture
    def client(self) -> MagicMock:
        return MagicMock(spec=redis.Redis)

    def test_get_hit(self, client) -> None:
        client.get.return_value = "3"
        assert RedisCache(client).get("user_album_likes:a") == CacheLookup(hit=True, value="3")

    def test_get_missing_key_is_miss(self, client) -> None:
        client.get.return_value = None
        lookup = RedisCache(client).get("user_album_likes:a")
        assert lookup.hit is False
        assert lookup.value is None

    def test_get_error_is_miss(self, client) -> None:
        client.get.side_effect = redis.TimeoutError("slow")
        assert RedisCache(client).get("user_album_likes:a").hit is False

    def test_get_undecodable_value_is_miss(self, client) -> None:
        """A stored value that is not valid UTF-8 reads as a miss."""
        client.get.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        assert RedisCache(client).get("user_album_likes:a") == CacheLookup.miss()

    def test_defaults_to_shared_client(self, client) -> None:
        with patch.object(redis_cache, "_client", client):
            assert RedisCache().client is client

    def test_without_shared_client_raises(self) -> None:
        with patch.object(redis_cache, "_client", None):
            with pytest.raises(RuntimeError):
                RedisCache()

    def test_set_passes_ttl(self, client) -> None:
        RedisCache(client).set("user_album_likes:a", 3, ttl=1800)
        client.set.assert_called_once_with("user_album_likes:a", 3, ex=1800)

    def test_set_without_ttl(self, client) -> None:
        RedisCache(client).set("k", 1)
        client.set.assert_called_once_with("k", 1, ex=None)

    def test_set_error_propagates(self, client) -> None:
        client.set.side_effect = redis.ConnectionError("down")
        with pytest.raises(redis.ConnectionError):
            RedisCache(client).set("k", 1)

    def test_delete(self, client) -> None:
        client.delete.return_value = 0
        RedisCache(client).delete("user_album_likes:a")
        client.delete.assert_called_once_with("user_album_likes:a")


class TestClientLifecycle:
    """Tests for init_client / get_client / close_client."""

    @pytest.fixture(autouse=True)
    def reset_client(self):
        redis_cache._client = None
        yield
        redis_cache._client = None

    def test_get_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError):
            redis_cache.get_client()

    def test_init_is_idempotent_and_close_resets(self) -> None:
        fake = MagicMock()
        with patch.object(redis_cache.redis.Redis, "from_url", return_value=fake) as from_url:
            assert redis_cache.init_client("redis://cache:6379/1") is fake
            assert redis_cache.init_client("redis://cache:6379/1") is fake
        from_url.assert_called_once_with("redis://cache:6379/1", decode_responses=True)
        assert redis_cache.get_client() is fake

        redis_cache.close_client()
        fake.close.assert_called_once()
        with pytest.raises(RuntimeError):
            redis_cache.get_client()
