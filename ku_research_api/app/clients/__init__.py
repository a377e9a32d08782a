"""
Outbound HTTP clients.

Clients wrap external services this API talks to.  They are injected
into the components that use them so tests can substitute fakes.
"""
