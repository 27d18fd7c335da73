"""Application wiring: settings, logging and the refresh scheduler."""
