"""
Wrapper around the standard configparser that reads the system, the
environment supplied and the per-user configuration files, and never
raises on missing sections or options.
"""
import configparser
import os

__all__ = ["Config", "config_files"]

def config_files():
    conffiles = []
    conffiles.append("/etc/composer2spec.conf")
    composer2spec_conf = os.environ.get("COMPOSER2SPEC_CONF")
    if composer2spec_conf:
        conffiles.append(composer2spec_conf)
    conffiles.append(os.path.expanduser("~/.composer2spec/config"))
    return conffiles

class Config:
    def __init__(self, conffiles=None):
        # no interpolation, spec file macros such as %{_datadir} are
        # legitimate option values
        self._config = configparser.RawConfigParser()
        if conffiles is None:
            conffiles = config_files()
        for file in conffiles:
            if os.path.isfile(file):
                self._config.read(file)

    def set(self, section, option, value):
        if not self._config.has_section(section):
            self._config.add_section(section)
        return self._config.set(section, option, value)

    def get(self, section, option, default=None):
        try:
            return self._config.get(section, option)
        except configparser.Error:
            return default

    def getbool(self, section, option, default=None):
        ret = self.get(section, option, default)
        states = {'1': 1, 'yes': 1, 'true': 1, 'on': 1,
                  '0': 0, 'no': 0, 'false': 0, 'off': 0}
        if type(ret) == type("") and ret.lower() in states:
            return states[ret.lower()]
        return default

# vim:ts=4:sw=4:et
