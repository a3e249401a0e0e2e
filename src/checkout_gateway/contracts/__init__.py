"""
Contracts (data models).

This folder defines the request/response shapes shared by every checkout client, e.g.:
- the request context (session, segment, auth token, sales channel, order form id)
- simulation request bodies
- the raw response envelope
- the domain error taxonomy and the result variant returned by every operation

Both the mock and the real HTTP transport are driven through these contracts,
so the checkout client never depends on a concrete HTTP library.
"""
