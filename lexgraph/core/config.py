"""
Central configuration management for LexGraph.

Loads settings from environment variables and provides typed access.
"""
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


DEFAULT_SEARCH_FIELDS = [
    "text",
    "full_name",
    "display_label",
    "definition",
    "entity",
    "concept",
]


class QuerySettings(BaseSettings):
    """Default query parameters used to seed a FilterState."""
    search_fields: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SEARCH_FIELDS),
        alias="LEXGRAPH_SEARCH_FIELDS",
    )
    search_logic: str = Field(default="OR", alias="LEXGRAPH_SEARCH_LOGIC")
    ranking_mode: str = Field(default="global", alias="LEXGRAPH_RANKING_MODE")
    expansion_depth: int = Field(default=1, alias="LEXGRAPH_EXPANSION_DEPTH")
    max_nodes_per_expansion: int = Field(
        default=10,
        alias="LEXGRAPH_MAX_NODES_PER_EXPANSION",
        description="Neighbor slots per frontier node, 0 = unbounded"
    )
    max_total_nodes: int = Field(default=500, alias="LEXGRAPH_MAX_TOTAL_NODES")


class LoggingSettings(BaseSettings):
    """Logging configuration for scripts."""
    level: str = Field(default="INFO", alias="LOG_LEVEL")
    format: str = Field(default="%(levelname)s: %(message)s", alias="LOG_FORMAT")

    def apply(self):
        """Configure the root logger."""
        logging.basicConfig(
            level=getattr(logging, self.level.upper(), logging.INFO),
            format=self.format,
        )


class PathSettings(BaseSettings):
    """Path configuration."""
    graph_data: Path = Field(default=Path("data/graph.json"), alias="GRAPH_DATA_PATH")

    def resolve(self, base_dir: Path) -> "PathSettings":
        """Resolve relative paths against base directory."""
        return PathSettings(GRAPH_DATA_PATH=base_dir / self.graph_data)


class Settings(BaseSettings):
    """Main settings aggregator."""
    query: QuerySettings = Field(default_factory=QuerySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    paths: PathSettings = Field(default_factory=PathSettings)

    # Project root
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_dotenv_if_exists():
    """Load .env file from the project root if it exists."""
    from dotenv import load_dotenv
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
