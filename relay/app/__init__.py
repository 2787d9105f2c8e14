"""
Mint Factory Relay
==================

HTTP relay that accepts collection creation requests, checks the caller's
API key, and forwards a normalized payload to the local mint factory deploy
service.

Packages:
    - auth:  x-api-key verification
    - proxy: /create-collection normalization and forwarding
"""
