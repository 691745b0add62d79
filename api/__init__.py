"""API layer - FastAPI routes, middleware, and response envelopes"""
