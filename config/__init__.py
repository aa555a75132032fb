"""Top-level package for Django configuration.

This package holds the settings modules for each environment and the WSGI
and ASGI entry points of the realty portal API.
"""
