"""Overwatch Workshop output."""

from owmidi.formats.workshop.writer import WorkshopWriter

__all__ = ["WorkshopWriter"]
