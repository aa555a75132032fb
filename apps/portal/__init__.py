"""Portal app package.

Holds the brokerage side of the platform: agents, offices and the admins
who manage them, together with the portal session resolution used by every
portal endpoint.
"""
