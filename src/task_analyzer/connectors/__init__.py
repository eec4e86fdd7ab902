"""Output/interaction connectors (console)."""
