"""Infrastructure Layer: state holders and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
"""
