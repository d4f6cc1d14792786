#!/usr/bin/python3
from ComposerSpec import InvalidArgument
from ComposerSpec.command import *
from ComposerSpec.package import PackageIdentifier
from ComposerSpec.cache import MetadataCache
from ComposerSpec.metadata import Metadata
from ComposerSpec.template import RenderContext, write_files

HELP = """\
Usage: composer2spec [OPTIONS] VENDOR/PROJECT

Generates autoload.php and php-VENDOR-PROJECT.spec in the current
directory from the Packagist metadata of a Composer package.

The registry answer is cached under $COMPOSER2SPEC_CACHE (default
~/.cache/composer2spec) and never refreshed; remove the cache entry to
fetch it again.

Options:
    -h      Show this message

Examples:
    composer2spec psr/log
    composer2spec psr/http-message
"""

def generate(package, targetdir=".", cache=None):
    identifier = PackageIdentifier(package)
    cache = cache or MetadataCache()
    document = cache.lookup(identifier)
    metadata = Metadata.from_document(document, identifier)
    context = RenderContext(identifier, metadata)
    return write_files(context, targetdir)

def parse_options(args=None):
    parser = OptionParser(help=HELP)
    opts, args = parser.parse_args(args)
    if len(args) != 1:
        raise InvalidArgument("invalid arguments, expected VENDOR/PROJECT")
    opts.package = args[0]
    return opts

def main():
    do_command(parse_options, generate)

# vim:et:ts=4:sw=4
