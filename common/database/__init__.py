"""
Database module - Supabase PostgREST tables and Storage buckets over HTTP.

Usage:
    from common.database import SupabaseDatabase, set_database, get_database

    db = SupabaseDatabase()
    await db.connect(url, service_role_key)
    set_database(db)

    # Access anywhere
    rows = await get_database().select("projects", {"user_id": user_id})
"""

from common.database.postgrest import (
    SupabaseDatabase,
    DatabaseError,
    set_database,
    get_database,
)

__all__ = [
    "SupabaseDatabase",
    "DatabaseError",
    "set_database",
    "get_database",
]
