"""Exceptions raised outside the rendering core."""


class CountdownError(Exception):
    """Base class for every error this package raises."""


class InputError(CountdownError):
    """A date or time argument could not be parsed."""


class ConfigError(CountdownError):
    pass


class FontError(CountdownError):
    pass


class OutputError(CountdownError):
    pass
