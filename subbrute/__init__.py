"""Subdomain discovery building blocks: candidate names, DNS packets, resolution and pacing."""

__version__ = "1.2.6"

__all__ = ["bandwidth", "config", "device", "generate", "packets", "resolver"]