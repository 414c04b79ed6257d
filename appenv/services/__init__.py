"""Environment access services package."""

from .env_loader import EnvFileLoader, resolve_base_path
from .env_service import Env, EnvKeyError
from .runtime_env_service import RuntimeEnvService

__all__ = [
    "Env",
    "EnvFileLoader",
    "EnvKeyError",
    "RuntimeEnvService",
    "resolve_base_path",
]
