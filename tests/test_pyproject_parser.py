"""Tests for the line-oriented pyproject.toml parser."""

from manifests.pyproject import parse_pyproject_toml


class TestPep621:
    """[project] dependencies arrays."""

    def test_multiline_dependencies_array(self):
        content = """[project]
name = "demo"
version = "0.1.0"
dependencies = [
    "requests>=2.28",
    "uvicorn[standard]>=0.20",
]
"""
        assert parse_pyproject_toml(content) == ["requests", "uvicorn"]

    def test_project_metadata_is_not_collected(self):
        """Keys next to the dependencies array never become names."""
        content = """[project]
name = "demo"
version = "0.1.0"
description = "A demo"
license = "MIT"
dependencies = ["click"]
"""
        assert parse_pyproject_toml(content) == ["click"]

    def test_single_line_array(self):
        content = '[project]\ndependencies = ["gpl-package", "python"]\n'
        assert parse_pyproject_toml(content) == ["gpl-package"]

    def test_dev_array_after_optional_dependencies_table(self):
        content = """[project]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
dev = ["pytest>=7", "black"]
"""
        assert parse_pyproject_toml(content) == ["httpx", "pytest", "black"]

    def test_closing_bracket_inside_extras_does_not_end_array(self):
        content = """[project]
dependencies = [
    "uvicorn[standard]",
    "fastapi",
]
"""
        assert parse_pyproject_toml(content) == ["uvicorn", "fastapi"]

    def test_bracket_in_trailing_comment_does_not_end_array(self):
        content = """[project]
dependencies = [  # runtime [core]
    "requests",  # see [docs]
    "click",
]
"""
        assert parse_pyproject_toml(content) == ["requests", "click"]

    def test_single_quoted_marker_inside_double_quoted_item(self):
        content = """[project]
dependencies = ["tomli; python_version<'3.11'", "click"]
"""
        assert parse_pyproject_toml(content) == ["tomli", "click"]

    def test_hash_inside_quoted_item_is_not_a_comment(self):
        content = """[project]
dependencies = [
    "pkg @ https://example.org/pkg.zip#sha256=abc]",
    "click",
]
"""
        assert parse_pyproject_toml(content) == ["pkg", "click"]


class TestPoetry:
    """[tool.poetry.*] tables."""

    def test_dependencies_and_groups(self):
        content = """[tool.poetry]
name = "demo"

[tool.poetry.dependencies]
python = "^3.10"
requests = "^2.28"
pandas = {version = "^2.0", extras = ["excel"]}

[tool.poetry.group.dev.dependencies]
pytest = "^7.0"

[build-system]
requires = ["poetry-core"]
build-backend = "poetry.core.masonry.api"
"""
        assert parse_pyproject_toml(content) == ["requests", "pandas", "pytest"]

    def test_comments_and_blank_lines_inside_section(self):
        content = """[tool.poetry.dependencies]
# runtime
requests = "^2.28"

; legacy comment
click = "^8"
"""
        assert parse_pyproject_toml(content) == ["requests", "click"]


class TestOtherSections:
    """Build requirements and dependency groups."""

    def test_toolchain_names_are_excluded(self):
        content = """[build-system.requires]
"setuptools>=61"
"wheel"
"cython"
"""
        assert parse_pyproject_toml(content) == ["cython"]

    def test_dependency_groups_table_of_arrays(self):
        content = """[dependency-groups]
test = ["pytest", "coverage[toml]"]
lint = ["ruff"]
"""
        assert parse_pyproject_toml(content) == ["pytest", "coverage", "ruff"]

    def test_dependency_group_with_markers_and_comment(self):
        content = """[dependency-groups]
test = ["pytest", "exceptiongroup; python_version<'3.11'", "hypothesis"]  # [ci]
"""
        assert parse_pyproject_toml(content) == ["pytest", "exceptiongroup", "hypothesis"]

    def test_unrelated_sections_are_ignored(self):
        content = """[tool.black]
line-length = 100

[tool.ruff]
select = ["E", "F"]
"""
        assert parse_pyproject_toml(content) == []

    def test_empty_content(self):
        assert parse_pyproject_toml("") == []
