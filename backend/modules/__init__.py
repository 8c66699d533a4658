"""
Feature modules for the Sanctuary client.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py / client classes: implementation against the church backend
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
