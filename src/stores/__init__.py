# Store-specific data adapters
# Each store module contains the hardcoded catalog and sales for that store

from .school_store import SchoolStoreLoader, StoreData

__all__ = ["SchoolStoreLoader", "StoreData"]
