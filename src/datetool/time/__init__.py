"""Contains the date/time types, conversion, formatting and arithmetic functions.

The function API is extremely straightforward: every operation is a free function over
immutable inputs. Notably, it was necessary to keep :class:`.Instant` and civil date-times
apart because they read calendar fields in different zones: an :class:`.Instant` uses the
host-local zone, while a civil date-time is always read at UTC+8.
"""
