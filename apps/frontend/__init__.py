"""Resonance client: httpx API adapter, router with last-route memory,
rich table views and the ``resonance-client`` command line.
"""
