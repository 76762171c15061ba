"""Pytest configuration and shared fixtures for the present2pdf test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import MINIMAL_PNG_BYTES, RecordingSurface, cleanup_test_dir, create_test_temp_dir

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
def surface() -> RecordingSurface:
    """Provide a drawing surface that records calls instead of writing a PDF."""
    return RecordingSurface()


@pytest.fixture
def png_file(temp_dir: Path) -> Path:
    """Write a 1x1 PNG image into the temporary directory."""
    path = temp_dir / "pixel.png"
    path.write_bytes(MINIMAL_PNG_BYTES)
    return path


@pytest.fixture
def sample_markdown_slides() -> str:
    """Provide a small Markdown-flavoured presentation."""
    return """# Go Concurrency
Patterns for real programs
2 Jan 2006
Tags: go, concurrency

Gopher One
Google
gopher@example.com

## Goroutines

Start one with the **go** keyword:

```go
// launch it
go worker(ch)
## not a section
```

- cheap
- *many* of them

## Channels

Visit [Go](https://go.dev) now.

> Don't communicate by sharing memory.
"""


@pytest.fixture
def sample_legacy_slides() -> str:
    """Provide a small legacy-format presentation."""
    return """Legacy Talk
A subtitle
15 Mar 2012

Jane Doe
https://example.com/jane

* First slide

Some plain text
over two lines.

- bullet one
- bullet two

  func main() {
      fmt.Println("hi")
  }

// a presentation comment

* Second slide

.link https://go.dev The Go site
"""
