from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./inventario.db"

    # API
    api_prefix: str = "/api"
    project_name: str = "Gestor de Inventario"
    environment: str = "development"
    app_port: int = 5000
    cors_origins: List[str] = ["*"]

    # JWT
    jwt_secret: str = "fallback_secret"
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = 24

    # Usuario administrador principal (no se puede eliminar)
    root_admin_email: str = "admin@utm.edu.ec"
    root_admin_password: str = "admin123"
    seed_on_startup: bool = True

    # Paginación
    default_page_size: int = 10
    max_page_size: int = 100

    log_level: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

settings = Settings()
