"""
HTTP routers for products and reviews.
"""
