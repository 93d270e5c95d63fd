"""Output layer: human (Rich) and machine (JSON) rendering."""
