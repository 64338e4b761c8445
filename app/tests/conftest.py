import pytest

# Settings read from the environment that change how a run behaves.
RUN_ENVIRONMENT = (
    "SYNC_INPUT_DIR",
    "SYNC_SOURCE_LANGUAGE",
    "SYNC_FILE_TYPE",
    "SYNC_SERVICE",
    "SYNC_MATCHER",
    "SYNC_DELETE_UNUSED_STRINGS",
    "SYNC_FIX_INCONSISTENCIES",
    "GOOGLE_TRANSLATE_API_KEY",
    "DEEPL_AUTH_KEY",
    "TRANSLATION_BATCH_SIZE",
    "TRANSLATION_TIMEOUT_SECONDS",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for name in RUN_ENVIRONMENT:
        monkeypatch.delenv(name, raising=False)
