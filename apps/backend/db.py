from typing import Optional

from supabase import create_client, Client

from apps.backend.utils.settings import get_settings


def get_supabase() -> Optional[Client]:
    settings = get_settings()
    if not settings.supabase_configured:
        return None
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
