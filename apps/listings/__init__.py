"""Listings app package.

Stores MLS listings and exposes the public read endpoints derived from
them, such as the city directory.
"""
