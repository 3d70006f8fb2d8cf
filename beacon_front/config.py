"""
Configuration — variables d'environnement.

Lues à l'appel (et non à l'import) pour que les tests puissent les surcharger.
"""
import os
from typing import Optional

DEFAULT_WORDPRESS_URL = "http://beacon-hill-staging.local"

# Durée de vie de la session de prévisualisation (cookies)
PREVIEW_MAX_AGE = 60 * 60


def wordpress_url() -> str:
    return os.getenv("WORDPRESS_URL", DEFAULT_WORDPRESS_URL).rstrip("/")


def graphql_endpoint() -> str:
    return f"{wordpress_url()}/graphql"


def faust_secret() -> Optional[str]:
    return os.getenv("FAUST_SECRET_KEY") or None


def app_env() -> str:
    return os.getenv("APP_ENV", "development")


def is_production() -> bool:
    return app_env() == "production"


def is_staging() -> bool:
    """Environnement de recette : badge STAGING, sitemap vide, robots fermé."""
    return os.getenv("SITE_ENV", "staging") == "staging"


def revalidate_seconds() -> int:
    try:
        return int(os.getenv("REVALIDATE_SECONDS", "60"))
    except ValueError:
        return 60


def wp_timeout() -> float:
    try:
        return float(os.getenv("WP_TIMEOUT", "15"))
    except ValueError:
        return 15.0
