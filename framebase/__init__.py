"""
Framebase - AI UI builder backend.

Auth, projects, pages, exports and AI layout generation on top of
Supabase and OpenAI.
"""
