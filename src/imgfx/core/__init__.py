"""Colour filter pipeline: colour space, filters, pixel pass, border and presentation."""
