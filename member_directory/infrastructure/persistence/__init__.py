"""Persistence adapters: tables, mappers and repositories."""
