from pathlib import Path
from tempfile import TemporaryDirectory

from hypothesis import given, strategies as st

from promptgit.utils import FileCache, MemoryCache

keys = st.text(min_size=1, max_size=60)
# Four-byte characters encode to about 5.3 base64 characters each; stay under NAME_MAX
file_keys = st.text(min_size=1, max_size=30)
values = st.text(max_size=100).filter(lambda value: "\r" not in value)
elapsed = st.integers(min_value=0, max_value=600)
ttls = st.integers(min_value=1, max_value=600)


class _Clock:
    def __init__(self) -> None:
        self.now = 1_700_000_000.0

    def __call__(self) -> float:
        return self.now


@given(key=keys, value=values, age=elapsed, ttl=ttls)
def test_memory_cache_freshness(key: str, value: str, age: int, ttl: int) -> None:
    clock = _Clock()
    cache = MemoryCache(clock=clock)
    _ = cache.set(key, value)
    clock.now += age

    assert (cache.get(key, ttl) == value) == (age < ttl)


@given(key=file_keys, value=values, age=elapsed, ttl=ttls)
def test_file_cache_freshness(key: str, value: str, age: int, ttl: int) -> None:
    clock = _Clock()
    with TemporaryDirectory() as directory:
        cache = FileCache(Path(directory), clock=clock)
        assert cache.set(key, value) is True
        clock.now += age

        assert (cache.get(key, ttl) == value) == (age < ttl)


@given(key=keys)
def test_encoded_key_is_a_flat_file_name(key: str) -> None:
    encoded = FileCache.encode_key(key)

    assert "/" not in encoded
    assert "\\" not in encoded
    assert not encoded.endswith(".time")
