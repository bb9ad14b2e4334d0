"""Employee directory service — REST façade over a pluggable employee store."""

__version__ = "1.0.0"
