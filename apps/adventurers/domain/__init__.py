"""Adventurer domain layer."""
