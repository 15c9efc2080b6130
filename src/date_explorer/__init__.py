"""Date & Time Explorer: parse a date/time string and view it across timezones."""

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("date-explorer")
except Exception:
    __version__ = "dev"
