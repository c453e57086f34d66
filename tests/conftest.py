"""Pytest configuration and shared fixtures for the md2html test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import MINIMAL_PNG_BYTES, cleanup_test_dir, create_test_temp_dir

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def png_file(temp_dir: Path) -> Path:
    """Write a 1x1 PNG into the temporary directory and return its path."""
    path = temp_dir / "pixel.png"
    path.write_bytes(MINIMAL_PNG_BYTES)
    return path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove MD2HTML_* variables so environment defaults do not leak into tests."""
    for key in list(os.environ):
        if key.startswith("MD2HTML_"):
            monkeypatch.delenv(key)


@pytest.fixture
def sample_markdown() -> str:
    """Provide a markdown document touching every block kind.

    Returns
    -------
    str
        Sample markdown used across multiple tests.

    """
    return """# Sample Document

This is a **sample document** with *italic text* and some `inline code`.

## Lists

- Item 1
- Item 2

1. First item
2. Second item

- [x] done
- [ ] todo

> Quoted text

```python
def hello_world():
    print("Hello, World!")
```

```mermaid
graph TD
  A-->B
```

| Left | Right |
|:-----|------:|
| a    | 1     |

---
"""
