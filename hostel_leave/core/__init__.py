"""
Core components: exceptions, security helpers, middleware and the
application context.
"""
