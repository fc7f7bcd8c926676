"""Protocols describing the boundaries of the deferred logging layer."""

from __future__ import annotations

from .logger import Logger, LoggerFactory, SimpleLogger

__all__ = ["Logger", "LoggerFactory", "SimpleLogger"]
