"""
clients/ - Outbound HTTP
========================
Clients for services this repository talks to over HTTP.
"""
