"""CLI commands for paymill_models."""
