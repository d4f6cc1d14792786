import json
import os

import pytest

from ComposerSpec import RegistryError
from ComposerSpec.cache import MetadataCache, cache_root
from ComposerSpec.package import PackageIdentifier

from conftest import make_document


class CountingFetch:
    def __init__(self, *documents):
        self.documents = list(documents)
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        return self.documents.pop(0)


class TestCacheRoot:
    def test_environment_override(self, monkeypatch, clean_config, tmp_path):
        monkeypatch.setenv("COMPOSER2SPEC_CACHE", str(tmp_path / "env"))
        clean_config.set("global", "cache-dir", str(tmp_path / "conf"))
        assert cache_root() == str(tmp_path / "env")

    def test_config_option(self, monkeypatch, clean_config, tmp_path):
        monkeypatch.delenv("COMPOSER2SPEC_CACHE", raising=False)
        clean_config.set("global", "cache-dir", str(tmp_path / "conf"))
        assert cache_root() == str(tmp_path / "conf")

    def test_xdg_cache_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("COMPOSER2SPEC_CACHE", raising=False)
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
        assert cache_root() == str(tmp_path / "composer2spec")

    def test_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("COMPOSER2SPEC_CACHE", raising=False)
        monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert cache_root() == str(tmp_path / ".cache" / "composer2spec")


class TestMetadataCache:
    def test_second_lookup_is_served_from_disk(self, tmp_path):
        ident = PackageIdentifier("psr/http-message")
        first = make_document()
        changed = make_document(version="9.9.9")
        fetch = CountingFetch(first, changed)
        cache = MetadataCache(str(tmp_path))
        assert cache.lookup(ident, fetch) == first
        assert cache.lookup(ident, fetch) == first
        assert fetch.urls == [ident.registry_url()]

    def test_entries_persist(self, tmp_path):
        ident = PackageIdentifier("psr/log")
        MetadataCache(str(tmp_path)).lookup(ident, CountingFetch({"a": 1}))
        path = tmp_path / "psr" / "log.json"
        assert json.loads(path.read_text()) == {"a": 1}
        fetch = CountingFetch()
        assert MetadataCache(str(tmp_path)).lookup(ident, fetch) == {"a": 1}
        assert fetch.urls == []

    def test_failed_fetch_is_not_cached(self, tmp_path):
        def failing(url):
            raise RegistryError("%s: 503 Service Unavailable" % url)
        cache = MetadataCache(str(tmp_path))
        ident = PackageIdentifier("psr/log")
        with pytest.raises(RegistryError):
            cache.lookup(ident, failing)
        assert not os.path.exists(cache.entry_path(ident.name))
        assert os.listdir(str(tmp_path)) == []

    def test_default_fetch_uses_registry(self, tmp_path, fake_registry, document):
        ident = PackageIdentifier("psr/http-message")
        assert MetadataCache(str(tmp_path)).lookup(ident) == document
        assert fake_registry.urls == [ident.registry_url()]

    def test_get_or_compute(self, tmp_path):
        cache = MetadataCache(str(tmp_path))
        calls = []

        def compute():
            calls.append(1)
            return {"n": len(calls)}

        assert cache.get_or_compute("a/b", compute) == {"n": 1}
        assert cache.get_or_compute("a/b", compute) == {"n": 1}
        assert cache.get_or_compute("a/c", compute) == {"n": 2}

    def test_expired_entries_are_computed_again(self, tmp_path):
        cache = MetadataCache(str(tmp_path), lifetime=60)
        cache.put("a/b", {"old": True})
        path = cache.entry_path("a/b")
        os.utime(path, (0, 0))
        assert cache.get_or_compute("a/b", lambda: {"old": False}) == {"old": False}

    def test_entry_path_stays_below_root(self, tmp_path):
        cache = MetadataCache(str(tmp_path))
        path = cache.entry_path("../../etc/passwd")
        assert path == os.path.join(str(tmp_path), "etc", "passwd.json")
