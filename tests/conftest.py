"""
Shared pytest fixtures for the profilemgr test suite.

Provides fixtures for:
- Temporary storage directories
- Registries bound to isolated settings directories
- Sample registry stores
"""

import tempfile
from collections.abc import Callable
from collections.abc import Generator
from pathlib import Path

import pytest

from profile_library.profiles import ProfileRegistry
from profile_library.storage.paths import ProfilePaths


@pytest.fixture
def temp_storage_dir() -> Generator[Path, None, None]:
    """Create temporary storage directory for tests.

    Automatically cleaned up after test completes.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_storage_env(temp_storage_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point PROFILEMGR_HOME at a temp directory.

    This ensures tests use isolated storage and don't interfere with
    real data or other tests.

    Returns:
        Path to temporary storage directory
    """
    monkeypatch.setenv("PROFILEMGR_HOME", str(temp_storage_dir))
    for name in (
        "PROFILEMGR_CONFIG_DIR",
        "PROFILEMGR_APP_NAME",
        "PROFILEMGR_SETTINGS_DIR",
        "PROFILEMGR_RESERVED_NAME",
        "PROFILEMGR_REGISTRY_SUFFIX",
        "PROFILEMGR_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return temp_storage_dir


@pytest.fixture
def settings_dir(tmp_path: Path) -> Path:
    """Directory holding the application's primary settings file."""
    directory = tmp_path / "settings"
    directory.mkdir()
    return directory


@pytest.fixture
def profile_paths(settings_dir: Path) -> ProfilePaths:
    """Paths without a named profile context."""
    return ProfilePaths.for_profile("app", settings_dir=settings_dir)


@pytest.fixture
def registry(profile_paths: ProfilePaths) -> ProfileRegistry:
    """Fresh registry: only the reserved entry, no default."""
    return ProfileRegistry(profile_paths)


@pytest.fixture
def write_store(profile_paths: ProfilePaths) -> Callable[[str], Path]:
    """Write raw text to the registry store of ``profile_paths``.

    Example:
        >>> def test_load(write_store, registry):
        ...     write_store("[Profile]\\nnCount=0\\n")
        ...     assert registry.read_settings()
    """

    def _write(content: str) -> Path:
        store = profile_paths.registry_file
        store.parent.mkdir(parents=True, exist_ok=True)
        store.write_text(content, encoding="utf-8")
        return store

    return _write
