"""Infrastructure Layer: MongoDB access and logging.

Invariants:
    - Driver exceptions never leave this layer unwrapped (StorageError)
"""
