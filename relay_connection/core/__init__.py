"""Core connection pagination: exceptions, settings and the windowing engine."""
