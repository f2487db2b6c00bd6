"""Stateless tools used by the analyzers and templates."""
