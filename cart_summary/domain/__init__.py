"""
Domain layer - Business logic and domain models.

This layer contains:
- Value objects (immutable, self-validating)
- Domain entities (Cart, CartSummary)
- Domain exceptions

No dependencies on infrastructure or frameworks.
"""
