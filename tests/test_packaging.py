"""Tests for the packaging metadata read by setup.py."""

import ast
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def setup_tree() -> ast.Module:
    return ast.parse((ROOT / "setup.py").read_text(encoding="utf-8"))


def test_every_file_setup_reads_exists(setup_tree: ast.Module) -> None:
    """Verify setup.py only opens files that ship with the project."""
    for node in ast.walk(setup_tree):
        if not (isinstance(node, ast.Call) and getattr(node.func, "attr", "") == "join"):
            continue
        parts = [arg.value for arg in node.args if isinstance(arg, ast.Constant)]
        if parts:
            assert (ROOT.joinpath(*parts)).exists(), parts


def test_no_long_description_without_readme(setup_tree: ast.Module) -> None:
    keywords = {
        kw.arg
        for node in ast.walk(setup_tree)
        if isinstance(node, ast.Call) and getattr(node.func, "id", "") == "setup"
        for kw in node.keywords
    }
    if not (ROOT / "README.md").exists():
        assert "long_description" not in keywords


def test_requirements_list_runtime_stack() -> None:
    lines = (ROOT / "requirements.txt").read_text(encoding="utf-8").splitlines()
    names = [line.split(">=")[0].strip() for line in lines if line.strip() and not line.startswith("#")]
    assert names == ["typer", "rich"]
