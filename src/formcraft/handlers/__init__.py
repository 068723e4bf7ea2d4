"""Host-facing handlers."""

from .host import FormHost, HostOptions, Mode, Theme, create_host

__all__ = ["FormHost", "HostOptions", "Mode", "Theme", "create_host"]
