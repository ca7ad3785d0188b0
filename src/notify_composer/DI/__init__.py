"""Dependency injection."""

from notify_composer.DI.container import Container

__all__ = ["Container"]
