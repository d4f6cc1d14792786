#!/usr/bin/python3
from setuptools import setup
import sys
import re

verpat = re.compile("VERSION *= *\"(.*)\"")
data = open("composer2spec").read()
m = verpat.search(data)
if not m:
    sys.exit("error: can't find VERSION")
VERSION = m.group(1)

setup(name="composer2spec",
      version = VERSION,
      description = "Generate RPM spec files and autoloaders for Composer packages",
      url = "https://packagist.org/",
      license = "GPL",
      long_description = """Turns the Packagist metadata of a PHP library into an
autoload.php stub and an RPM spec file ready to be packaged.""",
      packages = ["ComposerSpec", "ComposerSpec.commands"],
      scripts = ["composer2spec"],
      data_files = [
          ("etc", ["composer2spec.conf"])],
      install_requires=['httplib2', 'Cheetah3'],
      extras_require={'test': ['pytest']},
      )

# vim:ts=4:sw=4:et
