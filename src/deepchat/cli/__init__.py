"""Command line interface for deepchat."""
