"""Version information for VPSie SDK."""

__version__ = "0.1.0"
