from ComposerSpec import Error, InvalidArgument
import sys
import optparse

__all__ = ["OptionParser", "do_command"]

class OptionParser(optparse.OptionParser):
    """optparse parser printing a hand written help text

    Usage errors raise InvalidArgument so that do_command reports them
    like any other failure.
    """

    def __init__(self, usage=None, help=None, **kwargs):
        optparse.OptionParser.__init__(self, usage, **kwargs)
        self._overload_help = help

    def format_help(self, formatter=None):
        if self._overload_help:
            return self._overload_help
        return optparse.OptionParser.format_help(self, formatter)

    def error(self, msg):
        raise InvalidArgument(msg)

def do_command(parse_options_func, main_func):
    """Runs main_func with the parsed options, mapping errors to exit 1"""
    try:
        opt = parse_options_func()
        main_func(**opt.__dict__)
    except Error as e:
        sys.stderr.write("error: %s\n" % str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.stderr.write("interrupted\n")
        sys.stderr.flush()
        sys.exit(1)

# vim:et:ts=4:sw=4
