"""Tests for path probing and components directory discovery."""

from pathlib import Path

import pytest

from create_component.errors import ComponentsDirError
from create_component.paths import (
    COMPONENT_DIR_CANDIDATES,
    DEFAULT_COMPONENTS_DIR,
    exists,
    is_directory,
    locate_components_dir,
)


class TestExists:
    """Tests for the path prober."""

    def test_existing_file_and_directory(self, tmp_path: Path) -> None:
        """Files and directories both count as existing."""
        file_path = tmp_path / "a.txt"
        file_path.write_text("x")

        assert exists(tmp_path) is True
        assert exists(file_path) is True
        assert exists(str(file_path)) is True

    def test_missing_path(self, tmp_path: Path) -> None:
        """A missing entry is reported as False."""
        assert exists(tmp_path / "nope") is False

    def test_access_errors_collapse_to_false(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Permission errors are not raised to the caller."""

        def deny(*args: object, **kwargs: object) -> None:
            raise PermissionError("denied")

        monkeypatch.setattr("create_component.paths.os.stat", deny)

        assert exists(tmp_path) is False

    def test_is_directory_rejects_files(self, tmp_path: Path) -> None:
        """is_directory is False for a regular file."""
        file_path = tmp_path / "components"
        file_path.write_text("not a dir")

        assert is_directory(file_path) is False
        assert is_directory(tmp_path) is True


class TestLocateComponentsDir:
    """Tests for locate_components_dir."""

    def test_candidate_order(self) -> None:
        """Candidates are probed in the documented order."""
        assert [c.as_posix() for c in COMPONENT_DIR_CANDIDATES] == [
            "components",
            "src/components",
            "app/components",
            "src/app/components",
            "lib/components",
            "src/lib/components",
        ]

    @pytest.mark.parametrize("candidate", [c.as_posix() for c in COMPONENT_DIR_CANDIDATES])
    def test_finds_each_candidate(self, tmp_path: Path, candidate: str) -> None:
        """Each candidate is found when it is the only one present."""
        (tmp_path / candidate).mkdir(parents=True)

        located = locate_components_dir(tmp_path)

        assert located.path == tmp_path / candidate
        assert located.created is False

    def test_first_match_wins(self, tmp_path: Path) -> None:
        """With several candidates present, the highest priority one is returned."""
        for candidate in ("src/lib/components", "app/components", "src/components"):
            (tmp_path / candidate).mkdir(parents=True)

        located = locate_components_dir(tmp_path)

        assert located.path == tmp_path / "src" / "components"

    def test_skips_file_named_like_candidate(self, tmp_path: Path) -> None:
        """A file called components does not count as the components directory."""
        (tmp_path / "components").write_text("")
        (tmp_path / "lib" / "components").mkdir(parents=True)

        located = locate_components_dir(tmp_path)

        assert located.path == tmp_path / "lib" / "components"

    def test_creates_default_when_missing(self, tmp_path: Path) -> None:
        """src/components is created with its parents when nothing matches."""
        located = locate_components_dir(tmp_path)

        assert located.created is True
        assert located.path == tmp_path / DEFAULT_COMPONENTS_DIR
        assert located.path.is_dir()

    def test_defaults_to_cwd(self, project_dir: Path) -> None:
        """Without a root, the current working directory is searched."""
        (project_dir / "app" / "components").mkdir(parents=True)

        located = locate_components_dir()

        assert located.path.resolve() == (project_dir / "app" / "components").resolve()

    def test_custom_candidates(self, tmp_path: Path) -> None:
        """Callers can pass their own candidate list."""
        (tmp_path / "ui" / "widgets").mkdir(parents=True)
        (tmp_path / "components").mkdir()

        located = locate_components_dir(tmp_path, candidates=[Path("ui", "widgets")])

        assert located.path == tmp_path / "ui" / "widgets"

    def test_creation_failure_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A failing mkdir surfaces as ComponentsDirError."""

        def refuse(self: Path, *args: object, **kwargs: object) -> None:
            raise PermissionError("Permission denied")

        monkeypatch.setattr(Path, "mkdir", refuse)

        with pytest.raises(ComponentsDirError) as exc_info:
            locate_components_dir(tmp_path)

        assert exc_info.value.path == tmp_path / DEFAULT_COMPONENTS_DIR
        assert "Permission denied" in exc_info.value.message
