"""
Catalog Service Core

- models: entity schemas (pydantic)
- validation: validation gate for untrusted input
- normalization: canonicalization of lookup keys
- repositories: one Supabase-backed repository per entity
- db: Database container owning the client
- auth: GitHub session handling
- routers: FastAPI routers
"""
