"""Singleton providers for infrastructure adapters."""
