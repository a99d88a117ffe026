"""
Core package for the Medicare Advantage enrollment dashboard.

Submodules provide CSV loading, enrichment, filtering, aggregation, and user
interface rendering helpers that are orchestrated by the top-level `app.py`.
"""
