"""Shared plumbing: configuration, exceptions, logging, file helpers, CLI."""
