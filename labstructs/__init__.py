"""Array and linked-list sequences, sorters, ownership handles, a sorted sequence and a hash table."""

__version__ = "0.1.0"