from fastapi import HTTPException
from supabase import create_client, Client
import os
import logging

logger = logging.getLogger(__name__)


def _supabase_settings(key_env: str = "SUPABASE_KEY"):
    supabase_url = os.getenv("SUPABASE_URL")
    supabase_key = os.getenv(key_env) or os.getenv("SUPABASE_KEY")

    if not supabase_url or not supabase_key:
        logger.error("Supabase URL or Key not found in environment variables")
        raise HTTPException(status_code=500, detail="Server configuration error")
    return supabase_url, supabase_key


def anon_client() -> Client:
    supabase_url, supabase_key = _supabase_settings()
    return create_client(supabase_url, supabase_key)


# Used where there is no user session yet (signup writes profile + role)
def service_client() -> Client:
    supabase_url, supabase_key = _supabase_settings("SUPABASE_SERVICE_ROLE_KEY")
    return create_client(supabase_url, supabase_key)
