"""Ports the naming domain depends on."""

from .transliterator_protocol import Transliterator

__all__ = ["Transliterator"]
