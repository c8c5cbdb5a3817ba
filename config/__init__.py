"""Top-level package for Django configuration.

This package exposes the configuration of the ShareIt platform. It
contains settings modules for different environments and entry points
for WSGI and ASGI.
"""
