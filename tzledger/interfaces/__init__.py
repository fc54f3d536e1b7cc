"""Interfaces Layer - external entry points into the service."""
