"""Command line interface for paymill_models."""
