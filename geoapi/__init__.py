"""Request models, response parsing and shared types for the Roads, Time Zone and Static Maps web services."""

__version__ = "0.1.0"

__all__ = ["fieldmasks", "placetypes", "roads", "staticmap", "timezone", "transport", "types"]