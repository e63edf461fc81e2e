"""Configuration and access to external systems (Google APIs, Supabase, lead sink)."""
