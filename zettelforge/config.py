from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Vault settings
    vault_path: str = "data/notes"
    inbox_folder: str = "Inbox"
    permanent_folder: str = "Zettelkasten"

    # Front-matter settings
    note_type_field: str = "note_type"
    atomic_note_type: str = "atomic-note"

    # Near-duplicate detection settings
    shingle_size: int = 2
    similarity_threshold: float = 0.5
    max_similar_results: int = 5

    # Relevance retrieval settings
    relevance_limit: int = 20
    relevance_min_token_length: int = 3
    title_weight: int = 2
    tag_weight: int = 1

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
