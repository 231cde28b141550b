"""Application services orchestrating the search use cases."""
