"""
models/ - Domain Models
=======================
Plain dataclasses for store rows and the JSON envelopes built from them.
"""
