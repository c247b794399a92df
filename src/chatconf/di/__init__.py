"""Dependency wiring."""

from chatconf.di.container import Container

__all__ = ["Container"]
