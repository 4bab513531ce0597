from typing import List, Union
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from sqlalchemy.engine import URL


load_dotenv()


class Settings(BaseSettings):
    app_name: str = "SCM Inventory API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3006
    allowed_hosts: str = "*"
    log_file: str = "logs/application.log"

    # Database
    db_driver: str = "mysql+pymysql"
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "scm_system"
    db_port: int = 3306
    database_url: str = ""

    @property
    def sqlalchemy_url(self) -> Union[str, URL]:
        """
        Full connection URL. DATABASE_URL wins over the individual DB_* parts.
        """
        if self.database_url:
            return self.database_url

        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_hosts.split(",") if origin.strip()]
