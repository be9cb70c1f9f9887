"""
Tests for the Redis cache store (client mocked).
"""

import json
import time
from unittest.mock import MagicMock

import redis

from news_proxy.repositories import RedisCacheRepository

PAYLOAD = {"articles": [{"title": "Hola"}]}


def make_repository(client=None):
    return RedisCacheRepository(redis_client=client or MagicMock(), prefix="news", ttl=300)


def test_set_writes_hash_with_expiry():
    client = MagicMock()
    pipe = client.pipeline.return_value
    repo = make_repository(client)

    assert repo.set("health_12", PAYLOAD).ok

    key, = pipe.hset.call_args.args
    mapping = pipe.hset.call_args.kwargs["mapping"]
    assert key == "news:health_12"
    assert json.loads(mapping["payload"]) == PAYLOAD
    assert float(mapping["timestamp"]) <= time.time()
    pipe.expire.assert_called_once_with("news:health_12", 300)
    pipe.execute.assert_called_once()


def test_get_fresh_entry_is_a_hit():
    client = MagicMock()
    client.hgetall.return_value = {
        b"payload": json.dumps(PAYLOAD).encode(),
        b"timestamp": str(time.time() - 10).encode(),
    }
    repo = make_repository(client)

    lookup = repo.get("health_12", ttl=300)
    assert lookup.hit
    assert lookup.payload == PAYLOAD
    client.hgetall.assert_called_once_with("news:health_12")


def test_get_stale_entry_is_deleted():
    client = MagicMock()
    client.hgetall.return_value = {
        b"payload": json.dumps(PAYLOAD).encode(),
        b"timestamp": str(time.time() - 400).encode(),
    }
    client.delete.return_value = 1
    repo = make_repository(client)

    lookup = repo.get("health_12", ttl=300)
    assert not lookup.hit
    assert lookup.reason == "expired"
    client.delete.assert_called_once_with("news:health_12")


def test_get_absent_entry():
    client = MagicMock()
    client.hgetall.return_value = {}

    assert make_repository(client).get("health_12", ttl=300).reason == "absent"


def test_connection_errors_degrade_silently():
    client = MagicMock()
    client.hgetall.side_effect = redis.ConnectionError("down")
    client.pipeline.return_value.execute.side_effect = redis.ConnectionError("down")
    client.ping.side_effect = redis.ConnectionError("down")
    repo = make_repository(client)

    assert not repo.get("health_12", ttl=300).hit
    assert not repo.set("health_12", PAYLOAD).ok
    assert not repo.health_check()


def test_clear_deletes_prefixed_keys():
    client = MagicMock()
    client.scan_iter.return_value = [b"news:a_12", b"news:b_12"]
    client.delete.return_value = 1

    assert make_repository(client).clear() == 2
    client.scan_iter.assert_called_once_with(match="news:*")
