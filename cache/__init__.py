"""
cache/ - Cache Layer
====================
Redis-backed key-value cache. Nothing stored here is authoritative;
every cached value can be recomputed from PostgreSQL.
"""
