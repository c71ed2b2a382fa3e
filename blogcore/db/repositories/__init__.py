"""
Repositories for blog data access.

`BlogRepository` is the façade over posts, tags, topics, categories and
authors; `CustomerRepository` resolves the customer identities authors are
attached to.
"""

from .blog import BlogRepository
from .customers import CustomerRepository
from .results import Created, CreateResult, Rejected

__all__ = ["BlogRepository", "CustomerRepository", "Created", "CreateResult", "Rejected"]
