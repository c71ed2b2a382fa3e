"""
Blog service core: ORM models, repositories and HTTP routers for posts,
tags, topics, categories and authors.
"""

__version__ = "1.0.0"
