"""Bounded contexts of vitae: settings, layout, composing, rendering."""
