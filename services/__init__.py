"""
services/ - Business Logic Layer
================================
Builds response envelopes from repository results. Handlers call these;
services never touch HTTP.
"""
