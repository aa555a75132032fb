"""Users app package.

Defines the custom user model shared by the public site and the portal.
Accounts log in by email and carry a single role that decides portal
access. Use ``apps.users.models.CustomUser`` as the AUTH_USER_MODEL
throughout the project.
"""
