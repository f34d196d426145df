"""Template loading, values loading and rendering."""
