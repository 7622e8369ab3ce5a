"""Configuration, logging, exceptions and small helpers shared by the date/time modules."""
