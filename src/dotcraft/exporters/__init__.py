"""Graph exporters: DOT and JSON."""
