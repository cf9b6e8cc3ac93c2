from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "deployment-gateway"

    HOST: str = Field("0.0.0.0", alias="HOST")
    PORT: int = Field(3002, alias="PORT")

    # Filesystem locations used by the external commands
    SCRIPTS_DIR: str = Field("/opt/nomad-config", alias="SCRIPTS_DIR")
    REPO_DIR: str = Field("/opt/repos/app1", alias="REPO_DIR")
    DEPLOY_SCRIPT: str = Field("deploy.sh", alias="DEPLOY_SCRIPT")
    CLEANUP_SCRIPT: str = Field("cleanup.sh", alias="CLEANUP_SCRIPT")
    GIT_REMOTE: str = Field("origin", alias="GIT_REMOTE")

    # Container naming and the public URL deployments are reachable under
    CONTAINER_PREFIX: str = Field("app1_", alias="CONTAINER_PREFIX")
    PUBLIC_BASE_URL: str = Field("http://localhost:3001", alias="PUBLIC_BASE_URL")

    # Reverse proxy (Caddy) admin API
    PROXY_ADMIN_URL: str = Field("http://127.0.0.1:2020", alias="PROXY_ADMIN_URL")
    PROXY_ROUTES_PATH: str = Field(
        "/config/apps/http/servers/srv0/routes", alias="PROXY_ROUTES_PATH"
    )

    # Process execution limits
    MAX_OUTPUT_BYTES: int = Field(10 * 1024 * 1024, alias="MAX_OUTPUT_BYTES")
    MAX_CONCURRENT_COMMANDS: int = Field(0, alias="MAX_CONCURRENT_COMMANDS")

    STATIC_DIR: str = Field("public", alias="STATIC_DIR")
    ALLOWED_CORS_ORIGINS: str = Field("*", alias="ALLOWED_CORS_ORIGINS")
    LOG_LEVEL: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env", populate_by_name=True, extra="ignore"
    )

    @property
    def cors_origins_list(self) -> list[str]:
        if self.ALLOWED_CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_CORS_ORIGINS.split(",")]

    @property
    def routes_url(self) -> str:
        return self.PROXY_ADMIN_URL.rstrip("/") + self.PROXY_ROUTES_PATH

    def deployment_url(self, branch: str) -> str:
        """Public URL a branch deployment is served under."""
        return f"{self.PUBLIC_BASE_URL.rstrip('/')}/{branch}/"
