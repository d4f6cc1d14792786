""" Handles Composer package names and the names derived from them."""

from ComposerSpec import InvalidArgument, config

__all__ = ["PackageIdentifier", "registry_base_url"]

DEFAULT_REGISTRY = "https://repo.packagist.org/p2/"

def registry_base_url():
    url = config.get("registry", "url", DEFAULT_REGISTRY)
    if not url.endswith("/"):
        url += "/"
    return url

class PackageIdentifier(object):
    """A validated "vendor/project" Composer package name"""

    def __init__(self, name):
        if name is None or not name.strip():
            raise InvalidArgument("empty package name")
        name = name.strip()
        vendor, sep, project = name.partition("/")
        if not sep or not vendor or not project or "/" in project:
            raise InvalidArgument("invalid package name %r, expected "
                                  "vendor/project" % name)
        self._name = name
        self._vendor = vendor
        self._project = project

    @property
    def name(self):
        return self._name

    @property
    def vendor(self):
        return self._vendor

    @property
    def project(self):
        return self._project

    def registry_url(self):
        return registry_base_url() + self._name + ".json"

    def output_name(self):
        return "php-%s-%s" % (self._vendor, self._project)

    def spec_filename(self):
        return self.output_name() + ".spec"

    def __eq__(self, other):
        return isinstance(other, PackageIdentifier) and \
                self._name == other._name

    def __hash__(self):
        return hash(self._name)

    def __repr__(self):
        return "PackageIdentifier(%r)" % self._name

    def __str__(self):
        return self._name

# vim:et:ts=4:sw=4
