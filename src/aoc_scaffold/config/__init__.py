"""
Configuration helpers for the scaffolding toolkit.
"""

from .models import ConfigError, ScaffoldRequest
from .settings import Secrets, get_secrets, require_session

__all__ = ["ConfigError", "ScaffoldRequest", "Secrets", "get_secrets", "require_session"]
