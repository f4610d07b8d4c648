"""Command-line tools for dogbreeds.

- ``python -m dogbreeds.cli.lookup`` -- look up sub-breeds for one or more
  breeds through the caching provider.
- ``python -m dogbreeds.cli`` -- same as ``lookup``.
"""
