"""Milk tea tracker tooling."""
