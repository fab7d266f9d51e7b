"""Registry catalog — the named mirrors regswitch knows about.

- Models: catalog entries and the active-registry snapshot
- Catalog: in-memory CRUD over the named entries
- Store: JSON persistence of the whole catalog
"""
