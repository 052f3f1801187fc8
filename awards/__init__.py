"""Core (UI-agnostic) awards dashboard logic.

This package contains:
- record normalization (raw CSV row -> CanonicalRecord)
- aggregation, hierarchy and network builders
- per-view summaries and page compute functions (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
