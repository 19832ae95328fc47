"""
Billing package - adapts authenticated plugin requests to the Autumn billing API.

This package integrates with:
- Autumn: customers, products, checkout, usage and entities

Deciding which customer (user or organization) a request bills is handled
locally by the identity resolver; everything else is delegated to Autumn.
"""
