from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    search_index_path: str = "./build/search_index.js"
    base_url: str = "."

    log_level: str = "INFO"

    # Query dispatch
    debounce_delay: float = 0.3
    min_score: float = 1.0

    # Index
    prefix_search: bool = True
    fuzzy_distance: float = 2
    title_boost: float = 100.0

    # Rendering
    snippet_context: int = 100
    link_max_length: int = 50
    link_ellipsis_threshold: int = 30

    chainlit_host: str = "0.0.0.0"
    chainlit_port: int = 8000

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
