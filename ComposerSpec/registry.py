""" Fetches package documents from the Composer registry."""

import json
import sys

import httplib2

from ComposerSpec import RegistryError, config

__all__ = ["fetch", "MAX_REDIRECTS"]

MAX_REDIRECTS = 5

def fetch(url):
    """Returns the decoded JSON document found at url

    Any non-success answer, transport failure or undecodable body raises
    RegistryError. Nothing is retried.
    """
    if config.getbool("global", "verbose", 0):
        sys.stdout.write("fetching %s\n" % url)
    h = httplib2.Http()
    h.follow_redirects = True
    try:
        resp, content = h.request(url, "GET", redirections=MAX_REDIRECTS)
    except httplib2.RedirectLimit:
        raise RegistryError("%s: too many redirects" % url)
    except (httplib2.HttpLib2Error, OSError) as e:
        raise RegistryError("%s: %s" % (url, e))
    if resp.status < 200 or resp.status >= 300:
        raise RegistryError("%s: %d %s" % (url, resp.status, resp.reason),
                status=resp.status, reason=resp.reason)
    try:
        return json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise RegistryError("%s: invalid JSON document: %s" % (url, e))

# vim:et:ts=4:sw=4
