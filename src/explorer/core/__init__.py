"""Core components: configuration."""
