"""
Core domain models, errors and persisted-state contracts.

Everything here is independent of the hosting application (rendering,
storage transport, input handling).
"""
