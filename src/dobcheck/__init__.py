"""dobcheck — age verification across calendar and timezone models."""

__version__ = "0.1.0"
