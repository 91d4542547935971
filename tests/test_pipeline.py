"""Tests for the creation pipeline."""

import json
from pathlib import Path
from unittest.mock import Mock, call

import pytest

from unity_package_creator.assembler import assemble
from unity_package_creator.descriptors import ModuleDescriptor, PackageAuthor, PackageDescriptor
from unity_package_creator.filesystem import Filesystem, LocalFilesystem
from unity_package_creator.pipeline import PackageCreationPipeline
from unity_package_creator.plan import BuildPlan, PlannedFile


def _plan(target_root: Path, runtime_name: str = "Tool", editor_name: str = "Tool.Editor") -> BuildPlan:
    runtime = ModuleDescriptor.runtime()
    runtime.name = runtime_name
    editor = ModuleDescriptor.editor()
    editor.name = editor_name
    package = PackageDescriptor(name="Tool", author=PackageAuthor(name="Me"))
    return assemble(package, runtime, editor, target_root, LocalFilesystem())


class TestRealize:
    """Test writing plans to disk."""

    def test_writes_package_layout(self, tmp_path: Path) -> None:
        """Test that every planned directory and file exists afterwards."""
        plan = _plan(tmp_path)

        PackageCreationPipeline(LocalFilesystem()).realize(plan)

        root = tmp_path / "com.me.tool"
        for name in ("Documentation~", "Samples~", "Editor", "Runtime"):
            assert (root / name).is_dir()
        assert list((root / "Samples~").iterdir()) == []
        assert (root / "README.md").read_text() == "# com.me.tool"
        assert (root / "CHANGELOG.md").read_text() == ""
        assert (root / "Documentation~" / "com.me.tool.md").exists()
        assert json.loads((root / "package.json").read_text())["name"] == "com.me.tool"
        editor = json.loads((root / "Editor" / "Tool.Editor.asmdef").read_text())
        assert editor["references"] == ["Tool"]

    def test_directories_created_before_files(self, tmp_path: Path) -> None:
        """Test that the filesystem sees all directories before any write."""
        plan = _plan(tmp_path)
        fs = Mock(spec=Filesystem)

        PackageCreationPipeline(fs).realize(plan)

        names = [c[0] for c in fs.mock_calls]
        assert names == ["create_directory"] * 5 + ["write_file"] * 6
        assert fs.create_directory.call_args_list[0] == call(tmp_path / "com.me.tool")

    def test_resolve_hook_called_once_after_writes(self, tmp_path: Path) -> None:
        """Test that the resolve hook runs after the last write."""
        plan = _plan(tmp_path)
        manager = Mock()
        fs = Mock(spec=Filesystem)
        manager.attach_mock(fs, "fs")
        manager.attach_mock(Mock(), "resolve")

        PackageCreationPipeline(fs, manager.resolve).realize(plan)

        manager.resolve.assert_called_once_with()
        assert manager.mock_calls[-1] == call.resolve()

    def test_unsafe_module_name_rejected_before_writing(self, tmp_path: Path) -> None:
        """Test that names escaping the package abort before any write."""
        plan = _plan(tmp_path, runtime_name="../../Evil")
        fs = Mock(spec=Filesystem)
        hook = Mock()

        with pytest.raises(ValueError, match="escapes base directory"):
            PackageCreationPipeline(fs, hook).realize(plan)

        fs.create_directory.assert_not_called()
        fs.write_file.assert_not_called()
        hook.assert_not_called()

    def test_write_failure_propagates_without_rollback(self, tmp_path: Path) -> None:
        """Test that I/O errors surface and earlier steps are kept."""
        plan = BuildPlan(
            target_root=tmp_path,
            root=Path("pkg"),
            directories=(Path("pkg"),),
            files=(PlannedFile(Path("pkg") / "a.txt", "a"), PlannedFile(Path("pkg") / "b.txt", "b")),
        )
        fs = Mock(spec=Filesystem)
        fs.write_file.side_effect = [None, OSError("disk full")]
        hook = Mock()

        with pytest.raises(OSError, match="disk full"):
            PackageCreationPipeline(fs, hook).realize(plan)

        fs.create_directory.assert_called_once_with(tmp_path / "pkg")
        assert fs.write_file.call_count == 2
        hook.assert_not_called()

    def test_nested_package_directory_rejected(self, tmp_path: Path) -> None:
        """Test that a package root spanning several components is refused."""
        plan = BuildPlan(
            target_root=tmp_path,
            root=Path("com.a.tools") / "core",
            directories=(Path("com.a.tools") / "core",),
            files=(),
        )
        fs = Mock(spec=Filesystem)

        with pytest.raises(ValueError, match="single path component"):
            PackageCreationPipeline(fs).realize(plan)

        fs.create_directory.assert_not_called()

    def test_package_directory_outside_target_rejected(self, tmp_path: Path) -> None:
        """Test that the package directory must resolve inside the target root."""
        plan = BuildPlan(
            target_root=tmp_path / "Packages",
            root=Path(".."),
            directories=(Path(".."),),
            files=(),
        )
        fs = Mock(spec=Filesystem)

        with pytest.raises(ValueError, match="escapes base directory"):
            PackageCreationPipeline(fs).realize(plan)

        fs.create_directory.assert_not_called()
