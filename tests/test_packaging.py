from pathlib import Path

from setuptools import find_packages

ROOT = Path(__file__).resolve().parent.parent


def test_every_source_directory_is_an_installable_package():
    found = set(find_packages(where=str(ROOT), include=["quiz_admin*"]))
    source_dirs = {
        ".".join(path.parent.relative_to(ROOT).parts)
        for path in (ROOT / "quiz_admin").rglob("*.py")
    }

    assert source_dirs <= found
    assert {"quiz_admin.core", "quiz_admin.services", "quiz_admin.schemas.req", "quiz_admin.api.v1"} <= found
