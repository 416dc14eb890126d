"""Result annotation."""

from .annotator import DEFAULT_ZONE_COLORS, Annotator

__all__ = ['Annotator', 'DEFAULT_ZONE_COLORS']
