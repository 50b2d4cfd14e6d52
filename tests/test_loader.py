"""Tests for wingbeat.components.loader — file loading and class discovery."""

from pathlib import Path

from wingbeat.components.loader import (
    component_path,
    find_definition,
    is_component_dir,
    is_component_file,
    load_module,
    normalize_name,
    public_methods,
)


class TestNormalizeName:
    def test_plain(self) -> None:
        assert normalize_name("demo") == "demo"

    def test_nested_keeps_last_segment(self) -> None:
        assert normalize_name("admin/users") == "users"

    def test_hyphens_stripped(self) -> None:
        assert normalize_name("admin/user-list") == "userlist"


class TestLoadModule:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_module(tmp_path / "nope.py", "_nope") is None

    def test_executes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "thing.py"
        path.write_text("VALUE = 42\n", encoding="utf-8")
        module = load_module(path, "_thing")
        assert module is not None
        assert module.VALUE == 42


class TestFindDefinition:
    def test_case_and_separator_insensitive(self, tmp_path: Path) -> None:
        path = component_path(tmp_path, "blog-post")
        path.write_text("class BlogPost:\n    pass\n", encoding="utf-8")
        module = load_module(path, "_blog_post")
        assert module is not None

        cls = find_definition(module, "blog-post")
        assert cls is not None
        assert cls.__name__ == "BlogPost"

    def test_lowercase_class_name(self, tmp_path: Path) -> None:
        path = component_path(tmp_path, "home")
        path.write_text("class home:\n    pass\n", encoding="utf-8")
        module = load_module(path, "_home_lower")
        assert module is not None
        assert find_definition(module, "home") is module.home

    def test_imported_class_ignored(self, tmp_path: Path) -> None:
        path = component_path(tmp_path, "path")
        path.write_text("from pathlib import Path\n", encoding="utf-8")
        module = load_module(path, "_path_component")
        assert module is not None
        assert find_definition(module, "path") is None

    def test_nested_name(self, tmp_path: Path) -> None:
        path = tmp_path / "users.py"
        path.write_text("class Users:\n    pass\n", encoding="utf-8")
        module = load_module(path, "_users")
        assert module is not None
        assert find_definition(module, "admin/users") is module.Users


class TestPublicMethods:
    def test_excludes_private_and_data(self) -> None:
        class Sample:
            label = "x"

            def get_index(self) -> None: ...

            def _helper(self) -> None: ...

            @classmethod
            def instance(cls) -> "Sample":
                return cls()

        assert public_methods(Sample) == frozenset({"get_index", "instance"})


class TestVisibility:
    def test_component_file(self, tmp_path: Path) -> None:
        for name in ("home.py", "_base.py", ".draft.py"):
            (tmp_path / name).write_text("", encoding="utf-8")

        assert is_component_file(tmp_path / "home.py")
        assert not is_component_file(tmp_path / "_base.py")
        assert not is_component_file(tmp_path / ".draft.py")
        assert not is_component_file(tmp_path / "missing.py")

    def test_component_dir(self, tmp_path: Path) -> None:
        (tmp_path / "admin").mkdir()
        (tmp_path / "_shared").mkdir()

        assert is_component_dir(tmp_path / "admin")
        assert not is_component_dir(tmp_path / "_shared")
        assert not is_component_dir(tmp_path / "missing")
