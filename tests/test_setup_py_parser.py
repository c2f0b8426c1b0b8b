"""Tests for the setup.py install_requires reader."""

from manifests.setup_py import parse_setup_py


def test_install_requires_list():
    content = '''from setuptools import setup

setup(
    name="demo",
    version="1.0",
    install_requires=[
        "requests>=2.0",
        "click",
        "PyYAML==6.0",
    ],
)
'''
    assert parse_setup_py(content) == ["requests", "click", "PyYAML"]


def test_single_quoted_entries_are_not_read():
    content = "setup(install_requires=['requests', \"six\"])"
    assert parse_setup_py(content) == ["six"]


def test_no_install_requires():
    assert parse_setup_py("from setuptools import setup\nsetup(name='demo')\n") == []


def test_install_requires_from_variable_is_not_resolved():
    content = "REQS = open('requirements.txt').read().splitlines()\nsetup(install_requires=REQS)\n"
    assert parse_setup_py(content) == []


def test_extras_brackets_do_not_end_the_list():
    content = 'setup(install_requires = ["uvicorn[standard]>=0.20", "click"])'
    assert parse_setup_py(content) == ["uvicorn", "click"]
