"""
HTTP routes and application assembly for the webhook server.
"""
