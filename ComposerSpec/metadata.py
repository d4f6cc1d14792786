""" Projections of a registry document onto the fields the generated
files need."""

import collections
import re

from ComposerSpec import ConfigError, RegistryError
from ComposerSpec.version import convert

__all__ = ["Manifest", "Metadata", "DependencyConstraint", "RUNTIME"]

RUNTIME = "php"
SHORT_HASH_LEN = 7

DependencyConstraint = collections.namedtuple("DependencyConstraint",
        ["name", "version_expression"])

def _mapping(value):
    if isinstance(value, dict):
        return value
    return {}

def _string(value):
    if isinstance(value, str):
        return value
    return ""

class Manifest(object):
    """Version entry of a registry document with every field optional

    Missing or mistyped fields become empty strings, mappings or lists.
    """

    def __init__(self, entry):
        entry = _mapping(entry)
        source = _mapping(entry.get("source"))
        dist = _mapping(entry.get("dist"))
        autoload = _mapping(entry.get("autoload"))
        self.version = _string(entry.get("version"))
        self.description = _string(entry.get("description"))
        licenses = entry.get("license")
        if isinstance(licenses, str):
            licenses = [licenses]
        elif not isinstance(licenses, list):
            licenses = []
        self.licenses = [l for l in licenses if isinstance(l, str)]
        self.require = [(name, _string(constraint)) for name, constraint
                        in _mapping(entry.get("require")).items()]
        self.source_reference = _string(source.get("reference"))
        self.source_url = _string(source.get("url"))
        self.dist_url = _string(dist.get("url"))
        self.psr4 = list(_mapping(autoload.get("psr-4")).items())

class Metadata(object):

    def __init__(self, manifest, identifier=None):
        self.manifest = manifest
        self.identifier = identifier

    @classmethod
    def from_document(cls, document, identifier):
        """Picks the entry of identifier out of a registry document

        The registry answers {"packages": {name: [entry, ...]}}, newest
        entry first. A document directly keyed by the name is accepted
        as well.
        """
        name = identifier.name
        packages = _mapping(document)
        if "packages" in packages:
            packages = _mapping(packages["packages"])
        versions = packages.get(name)
        if not isinstance(versions, list) or not versions:
            raise RegistryError("no version of %s found in the registry "
                                "document" % name)
        return cls(Manifest(versions[0]), identifier)

    def dependency_constraints(self):
        return [DependencyConstraint(name, convert(constraint))
                for name, constraint in self.manifest.require
                if name != RUNTIME]

    def runtime_constraint(self):
        for name, constraint in self.manifest.require:
            if name == RUNTIME:
                return convert(constraint)
        return ""

    def commit_hash(self):
        return self.manifest.source_reference

    def short_commit_hash(self):
        return self.manifest.source_reference[:SHORT_HASH_LEN]

    def _psr4_root(self):
        roots = self.manifest.psr4
        if len(roots) != 1:
            if roots:
                found = "several: %s" % ", ".join(ns for ns, _ in roots)
            else:
                found = "none"
            raise ConfigError("exactly one psr-4 autoload namespace is "
                              "required, found %s" % found)
        return roots[0]

    def namespace(self):
        return self._psr4_root()[0]

    def namespace_directory(self):
        """Source directory mapped to the namespace, "." for the top"""
        paths = self._psr4_root()[1]
        if isinstance(paths, list):
            paths = paths[0] if paths else ""
        path = _string(paths).strip("/")
        return path or "."

    def description(self):
        return self.manifest.description

    def summary(self):
        lines = self.manifest.description.strip().splitlines()
        if not lines:
            return ""
        return lines[0].strip().rstrip(".")

    def license(self):
        return " and ".join(self.manifest.licenses)

    def source_url(self):
        return self.manifest.dist_url

    def homepage_url(self):
        return self.manifest.source_url

    def version(self):
        return re.sub(r"^v(?=\d)", "", self.manifest.version)

    def source_directory(self):
        """Name of the top directory of the dist archive

        GitHub archives unpack to OWNER-REPO-SHORTHASH. When the source
        is not hosted there, the package vendor and project are used.
        """
        m = re.match(r"^(?:https?|git)://github\.com/([^/]+)/([^/]+?)"
                     r"(?:\.git)?/?$", self.manifest.source_url)
        if m:
            owner, repo = m.groups()
        elif self.identifier is not None:
            owner, repo = self.identifier.vendor, self.identifier.project
        else:
            return self.short_commit_hash()
        return "%s-%s-%s" % (owner, repo, self.short_commit_hash())

# vim:et:ts=4:sw=4
