"""
Service layer abstraction.

Services encapsulate business logic and talk to the team store, so API
handlers never touch the store directly.
"""
