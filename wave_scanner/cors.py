from wave_scanner.config import settings


def cors_headers() -> dict[str, str]:
    """Headers attached to every response of the recommendations endpoint."""
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
    }
