"""CLI module for methodrouter."""
