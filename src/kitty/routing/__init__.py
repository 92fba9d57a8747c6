"""Routing: an append-only route table scanned in registration order.

Patterns are ``/``-separated segments; ``:name`` segments capture one
request segment each, everything else must match exactly.
"""
