import pytest
import redis

from src.snippet import init_registry


def _as_bytes(value):
    if isinstance(value, bytes):
        return value
    return str(value).encode("utf-8")


class FakeRedis:
    """In-memory stand-in for the handful of Redis commands the store uses."""

    def __init__(self):
        self.values = {}
        self.sorted_sets = {}
        self.sets = {}
        self.executed_pipelines = 0

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = _as_bytes(value)
        return True

    def exists(self, *keys):
        return sum(1 for key in keys if key in self.values)

    def zadd(self, key, mapping):
        members = self.sorted_sets.setdefault(key, {})
        added = sum(1 for member in mapping if member not in members)
        members.update(mapping)
        return added

    def zrevrange(self, key, start, end):
        members = self.sorted_sets.get(key, {})
        ordered = sorted(members, key=lambda member: members[member], reverse=True)
        stop = None if end == -1 else end + 1
        return [_as_bytes(member) for member in ordered[start:stop]]

    def sadd(self, key, *members):
        current = self.sets.setdefault(key, set())
        added = {_as_bytes(member) for member in members} - current
        current.update(added)
        return len(added)

    def srem(self, key, *members):
        current = self.sets.get(key, set())
        removed = {_as_bytes(member) for member in members} & current
        current.difference_update(removed)
        return len(removed)

    def smembers(self, key):
        return set(self.sets.get(key, set()))

    def pipeline(self, transaction=True):
        return FakePipeline(self)


class FakePipeline:
    def __init__(self, client):
        self._client = client
        self._commands = []

    def __getattr__(self, name):
        def _queue(*args, **kwargs):
            self._commands.append((name, args, kwargs))
            return self

        return _queue

    def execute(self):
        results = [getattr(self._client, name)(*args, **kwargs) for name, args, kwargs in self._commands]
        self._commands = []
        self._client.executed_pipelines += 1
        return results


class UnavailableRedis(FakeRedis):
    def pipeline(self, transaction=True):
        raise redis.ConnectionError("Connection refused")

    def zrevrange(self, key, start, end):
        raise redis.ConnectionError("Connection refused")


@pytest.fixture(scope="session", autouse=True)
def _model_registry():
    return init_registry()


@pytest.fixture
def fake_redis():
    return FakeRedis()
