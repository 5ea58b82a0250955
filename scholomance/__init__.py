"""Scholomance: a generative space-opera RPG back-end."""
