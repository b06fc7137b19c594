"""
Feature modules for trackmap.

Each feature is a self-contained module with:
- models.py - Dataclasses for the in-memory model
- schemas.py - Pydantic schemas (optional)
- exceptions.py - Error taxonomy (optional)
- service-style modules holding the logic (decoders, loader, enrichment)
"""
