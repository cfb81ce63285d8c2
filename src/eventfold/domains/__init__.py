"""Demo domains: cart, inventory, library, todo.

Each package exposes ``events`` (fact names and subject prefix),
``commands`` (payload schemas and handlers) and ``projection`` (state
types and fold).
"""
