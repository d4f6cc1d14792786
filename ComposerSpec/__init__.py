from . import ConfigParser

config = ConfigParser.Config()
del ConfigParser

class Error(Exception): pass

class CacheError(Error): pass

class OutputError(Error): pass

class InvalidArgument(Error): pass

class ConfigError(Error): pass

class RegistryError(Error):
    def __init__(self, msg, status=None, reason=None):
        Error.__init__(self, msg)
        self.status = status
        self.reason = reason

# vim:et:ts=4:sw=4
