"""
Real HTTP checkout clients.

These modules communicate with the VTEX checkout backend via HTTP:
- transport.py: httpx-based CheckoutTransport
- dispatcher.py: verb-level request pipeline (headers, errors)
- checkout.py: one method per checkout capability

Important:
- The checkout client depends only on the CheckoutTransport interface
- Responses are returned as CheckoutResult values shaped by src/checkout_gateway/contracts/*

Switching:
The selection of mock vs real transport happens in src/checkout_gateway/clients/__init__.py only.
"""
