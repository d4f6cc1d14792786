"""Shared fixtures: registry documents, a fake registry and an empty config"""

import json

import httplib2
import pytest

from ComposerSpec import cache, package, registry, template
from ComposerSpec.ConfigParser import Config


def make_document(name="psr/http-message", **overrides):
    entry = {
        "name": name,
        "description": "Common interface for HTTP messages.",
        "version": "1.0.1",
        "license": ["MIT"],
        "source": {
            "type": "git",
            "url": "https://github.com/php-fig/http-message.git",
            "reference": "abcdef1234567890",
        },
        "dist": {
            "type": "zip",
            "url": "https://api.github.com/repos/php-fig/http-message/zipball/abcdef1234567890",
        },
        "require": {"php": ">=5.3.0", "psr/container": "^1.0"},
        "autoload": {"psr-4": {"Psr\\Http\\Message\\": "src/"}},
    }
    entry.update(overrides)
    return {"packages": {name: [entry, {"version": "1.0.0"}]},
            "minified": "composer/2.0"}


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keeps the host configuration files out of the tests"""
    conf = Config(conffiles=[])
    for module in (cache, package, registry, template):
        monkeypatch.setattr(module, "config", conf)
    return conf


@pytest.fixture
def document():
    return make_document()


class FakeRegistry(object):
    """Stands in for httplib2.Http.request, recording requested urls"""

    def __init__(self, status=200, body=None):
        self.status = status
        self.body = body
        self.urls = []

    def request(self, http, uri, method="GET", **kwargs):
        self.urls.append(uri)
        resp = httplib2.Response({"status": str(self.status)})
        body = self.body
        if not isinstance(body, bytes):
            body = json.dumps(body).encode("utf-8")
        return resp, body


@pytest.fixture
def fake_registry(monkeypatch, document):
    fake = FakeRegistry(body=document)

    def request(http, uri, method="GET", **kwargs):
        return fake.request(http, uri, method, **kwargs)

    monkeypatch.setattr(httplib2.Http, "request", request)
    return fake
