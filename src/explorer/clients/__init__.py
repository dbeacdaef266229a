"""HTTP clients for the external Open Food Facts services."""
