"""OpenIM identity service adapter."""

from .client import MockOpenIMClient, OpenIMClient, OpenIMError, RealOpenIMClient

__all__ = ["OpenIMClient", "RealOpenIMClient", "MockOpenIMClient", "OpenIMError"]
