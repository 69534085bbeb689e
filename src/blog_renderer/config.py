"""Configuration for the blog renderer.

Settings come from an optional JSON file; command-line flags override them.
The database password can also be supplied through the BLOG_DB_PASSWORD
environment variable so it never has to be written to disk.
"""

import logging
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)

PASSWORD_ENV_VAR = "BLOG_DB_PASSWORD"


class DatabaseConfig(BaseModel):
    """Connection settings for the database loader.

    Attributes:
        driver: SQLAlchemy driver name (e.g. "mysql+pymysql", "sqlite")
        host: Database host, ignored by SQLite
        port: Database port, driver default when None
        username: Login name, ignored by SQLite
        password: Login password, ignored by SQLite
        connect_timeout: Seconds to wait when opening a connection
        author_table: Table holding author rows
        article_table: Table holding article rows
    """

    driver: str = "mysql+pymysql"
    host: str | None = "localhost"
    port: int | None = None
    username: str | None = "root"
    password: str | None = ""
    connect_timeout: float | None = 10.0
    author_table: str = "author"
    article_table: str = "article"

    @property
    def is_sqlite(self) -> bool:
        return self.driver.startswith("sqlite")

    def url(self, database: str) -> URL:
        """Build the SQLAlchemy URL for a database name (or SQLite file path)."""
        if self.is_sqlite:
            # read-only URI so a missing file is not created
            return URL.create(
                self.driver,
                database=f"file:{database}",
                query={"mode": "ro", "uri": "true"},
            )
        return URL.create(
            self.driver,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=database,
            query={"charset": "utf8mb4"} if self.driver.startswith("mysql") else {},
        )

    def connect_args(self) -> dict:
        """Driver keyword arguments for the connect timeout."""
        if self.connect_timeout is None:
            return {}
        if self.is_sqlite:
            return {"timeout": self.connect_timeout}
        return {"connect_timeout": int(self.connect_timeout)}


class BlogConfig(BaseModel):
    """Top-level blog settings.

    Attributes:
        title: Blog title shown in the header and the page title
        language: Value of the page's lang attribute
        source: Loader to use
        locator: File path or database name handed to the loader
        strict_authors: Fail the load when an article names an unknown author
        csv_delimiter: Field delimiter for CSV sources
        database: Settings for the database loader
    """

    title: str = "Vive la POO"
    language: str = "fr"
    source: Literal["json", "csv", "database"] = "json"
    locator: str | None = None
    strict_authors: bool = False
    csv_delimiter: str = Field(default=",", min_length=1, max_length=1)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)


def load_config(path: Path | None = None) -> BlogConfig:
    """Load blog settings from a JSON file.

    Args:
        path: Path to a JSON config file, or None for defaults

    Returns:
        BlogConfig with the BLOG_DB_PASSWORD override applied

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the file content is invalid
    """
    if path is None:
        config = BlogConfig()
    else:
        logger.debug(f"Reading config from {path}")
        config = BlogConfig.model_validate_json(path.read_text(encoding="utf-8"))

    password = os.environ.get(PASSWORD_ENV_VAR)
    if password is not None:
        config.database.password = password

    return config
