"""
Core domain models, mathematical primitives, and formatting helpers.

This package contains pure, stateless building blocks of the fitness
tracker that are independent of UI, network and persistence layers.
"""
