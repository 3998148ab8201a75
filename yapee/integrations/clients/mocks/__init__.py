"""
Mock integration clients.

These clients return fixed (but realistic) records without touching any
external system. They back every route of the mock API service.

Important:
- Mock clients return data shaped according to yapee/integrations/contracts/*
- Mock clients never mutate their data; every call returns the same records.
"""
