"""Command queue, geometry helpers and UI interaction commands for driving a scene in automated UI tests."""

__version__ = "0.1.0"