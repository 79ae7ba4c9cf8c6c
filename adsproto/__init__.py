"""Building blocks for the Beckhoff ADS protocol: addresses, errors, notifications,
PLC strings, symbols and file access."""

__version__ = "0.4.4"

__all__ = ["errors", "index", "ports", "netid", "notif", "strings", "symbol", "file"]