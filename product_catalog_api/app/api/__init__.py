"""
API package: dependencies, endpoint routers and their aggregation.
"""
