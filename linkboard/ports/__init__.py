"""Ports for the link synchronization engine's external collaborators."""
