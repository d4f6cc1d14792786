""" On-disk store of registry documents, one JSON file per package."""

import json
import os
import sys
import tempfile
import time

from ComposerSpec import CacheError, config, registry

__all__ = ["MetadataCache", "cache_root"]

def cache_root():
    """Finds the directory holding the cache entries

    The COMPOSER2SPEC_CACHE environment variable wins over the cache-dir
    option of the global section, which wins over the XDG cache home.
    """
    root = os.environ.get("COMPOSER2SPEC_CACHE")
    if root:
        return root
    root = config.get("global", "cache-dir", None)
    if root:
        return os.path.expanduser(root)
    cachehome = os.environ.get("XDG_CACHE_HOME") or \
            os.path.join(os.path.expanduser("~"), ".cache")
    return os.path.join(cachehome, "composer2spec")

class MetadataCache(object):
    """Compute-if-absent store for registry documents

    lifetime is the age in seconds after which an entry is computed
    again. None, the default, keeps entries forever: once written an
    entry is served until someone removes it from the cache directory.
    """

    def __init__(self, root=None, lifetime=None):
        self.root = root or cache_root()
        self.lifetime = lifetime

    def entry_path(self, key):
        parts = [part for part in key.split("/") if part not in ("", ".", "..")]
        if not parts:
            raise ValueError("invalid cache key: %r" % key)
        parts[-1] += ".json"
        return os.path.join(self.root, *parts)

    def _fresh(self, path):
        if self.lifetime is None:
            return True
        return time.time() - os.path.getmtime(path) < self.lifetime

    def get(self, key):
        path = self.entry_path(key)
        if not os.path.isfile(path) or not self._fresh(path):
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise CacheError("unreadable cache entry %s (%s), remove it "
                             "to fetch the package again" % (path, e))

    def put(self, key, value):
        path = self.entry_path(key)
        dirname = os.path.dirname(path)
        try:
            os.makedirs(dirname, exist_ok=True)
            fd, tmppath = tempfile.mkstemp(dir=dirname, suffix=".tmp")
        except OSError as e:
            raise CacheError("cannot write cache entry %s: %s" % (path, e))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f)
            os.replace(tmppath, path)
        except OSError as e:
            os.unlink(tmppath)
            raise CacheError("cannot write cache entry %s: %s" % (path, e))
        except BaseException:
            os.unlink(tmppath)
            raise

    def get_or_compute(self, key, func):
        value = self.get(key)
        if value is not None:
            return value
        value = func()
        self.put(key, value)
        return value

    def lookup(self, identifier, fetch=None):
        fetch = fetch or registry.fetch
        def compute():
            return fetch(identifier.registry_url())
        path = self.entry_path(identifier.name)
        if config.getbool("global", "verbose", 0) and os.path.isfile(path):
            sys.stdout.write("using cached %s\n" % path)
        return self.get_or_compute(identifier.name, compute)

# vim:et:ts=4:sw=4
