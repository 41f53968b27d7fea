"""CLI settings. The database is opened on first access, not at import."""

_config = None
_db_initialized = False


def get_config() -> dict:
    """Settings from storage.settings, with the database opened on the first call."""
    global _config, _db_initialized
    if _config is None:
        from storage.settings import load_config
        _config = load_config()
    if not _db_initialized:
        from storage.database.base import init_db, is_initialized
        # an embedding process (tests, the API) may already own a connection
        if not is_initialized():
            init_db(_config['database_url'])
        _db_initialized = True
    return _config


def get_log_level() -> str:
    return get_config()['log_level']
