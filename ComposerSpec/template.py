""" Renders the autoloader and the RPM spec file of a package."""

from Cheetah.Template import Template

from ComposerSpec import OutputError, config

import sys
import os
import tempfile

__all__ = ["RenderContext", "render_autoload", "render_spec",
           "write_files", "AUTOLOAD_FILENAME"]

AUTOLOAD_FILENAME = "autoload.php"
PHP_HOME = "/usr/share/php"

default_autoload_template = r"""<?php
/* Autoloader for $name and its dependencies */

require_once '$php_home/Fedora/Autoloader/autoload.php';

\Fedora\Autoloader\Autoload::addPsr4('$php_namespace', __DIR__);
#if $dependencies

\Fedora\Autoloader\Dependencies::required([
#for $dep in $dependencies
    '$php_home/${dep.name}/autoload.php',
#end for
]);
#end if
"""

default_spec_template = """\
%global php_home     %{_datadir}/php

Name:       $output_name
Version:    $version
Release:    1%{?dist}
Summary:    $summary

License:    $license
URL:        $homepage_url
Source0:    $source_url
Source1:    autoload.php

BuildArch:  noarch

Provides:   php-composer($name) = $version
Requires:   php-composer(fedora/autoloader)
#for $dep in $dependencies
Requires:   php-composer(${dep.name}) ${dep.version_expression}
#end for
#if $runtime_constraint
Requires:   php(language) $runtime_constraint
#end if

%description
$description

%prep
%setup -q -n $source_directory

%build

%install
mkdir -p %{buildroot}%{php_home}/$vendor/$project
cp -pr $namespace_directory/* %{buildroot}%{php_home}/$vendor/$project/
install -p -m 644 %{SOURCE1} %{buildroot}%{php_home}/$vendor/$project/$autoload_filename

%files
%license LICENSE
%doc README.md composer.json
%dir %{php_home}/$vendor
%{php_home}/$vendor/$project

%changelog
"""

class RenderContext(object):
    """Every value the templates may refer to

    Built from a package identifier and its registry metadata. Asking for
    the namespace is what rejects packages without a single psr-4 root,
    so constructing the context is enough to know both files can be
    rendered.
    """

    def __init__(self, identifier, metadata):
        self.name = identifier.name
        self.vendor = identifier.vendor
        self.project = identifier.project
        self.output_name = identifier.output_name()
        self.spec_filename = identifier.spec_filename()
        self.autoload_filename = AUTOLOAD_FILENAME
        self.php_home = PHP_HOME
        self.version = metadata.version()
        self.license = metadata.license()
        self.summary = metadata.summary()
        self.description = metadata.description()
        self.homepage_url = metadata.homepage_url()
        self.source_url = metadata.source_url()
        self.commit = metadata.commit_hash()
        self.short_commit = metadata.short_commit_hash()
        self.source_directory = metadata.source_directory()
        self.namespace = metadata.namespace()
        self.php_namespace = self.namespace.replace("\\", "\\\\")
        self.namespace_directory = metadata.namespace_directory()
        self.dependencies = metadata.dependency_constraints()
        self.runtime_constraint = metadata.runtime_constraint()

def _render(context, option, default):
    templpath = config.get("template", option, None)
    params = {}
    if templpath and os.path.exists(templpath):
        params["file"] = templpath
    else:
        if templpath:
            sys.stderr.write("warning: %s not found. using built-in "
                             "template.\n" % templpath)
        params["source"] = default
    params["searchList"] = [context]
    t = Template(**params)
    return t.respond()

def render_autoload(context):
    return _render(context, "autoload-path", default_autoload_template)

def render_spec(context):
    return _render(context, "spec-path", default_spec_template)

def write_files(context, targetdir="."):
    """Writes autoload.php and the spec file in targetdir

    Both templates are rendered and written to temporary files before
    either one is moved into place, existing files are overwritten. On
    failure neither file is left behind and OutputError is raised.
    Returns the paths written.
    """
    contents = [(context.autoload_filename, render_autoload(context)),
                (context.spec_filename, render_spec(context))]
    pending = []
    written = []
    try:
        for filename, content in contents:
            fd, tmppath = tempfile.mkstemp(dir=targetdir, prefix=".",
                                           suffix=".tmp")
            pending.append(tmppath)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(tmppath, 0o644)
        for tmppath, (filename, content) in zip(pending, contents):
            path = os.path.join(targetdir, filename)
            os.replace(tmppath, path)
            written.append(path)
    except OSError as e:
        for path in pending + written:
            if os.path.lexists(path) and not os.path.isdir(path):
                os.unlink(path)
        raise OutputError("could not write %s: %s" % (targetdir, e))
    if config.getbool("global", "verbose", 0):
        for path in written:
            sys.stdout.write("wrote %s\n" % path)
    return written

# vim:et:ts=4:sw=4
