from typing import Iterable

from fastapi import APIRouter


def create_systems_router(container_env: dict, secret_keys: Iterable[str] = ()):
    """Create systems router with access to container environment config."""
    router = APIRouter(prefix="/systems", tags=["System"])
    hidden = frozenset(secret_keys)

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/config")
    def get_config():
        """Return current environment configuration values, secrets masked."""
        env = {}
        for key, value in container_env.items():
            if value is None:
                env[key] = None
            elif key in hidden:
                env[key] = "***"
            else:
                env[key] = str(value)
        return {"environment": env}

    return router
