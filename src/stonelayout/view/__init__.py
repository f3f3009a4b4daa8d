"""Consumers of a finished Layout: box mesh and elevation drawing."""
