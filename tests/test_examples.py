# SPDX-License-Identifier: MIT
"""Test runner for example projects.

Discovers and runs all example projects in examples/.
Each example is a self-contained project that serves as both
a test and documentation for users.
"""

from __future__ import annotations

import os
import platform
import shutil
import subprocess
import sys
import tomllib
from pathlib import Path
from typing import Any

import pytest

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"
REPO_ROOT = Path(__file__).parent.parent


def discover_examples() -> list[Path]:
    """Discover all example directories that have a kmpp-build.py and test.toml."""
    examples = []
    if not EXAMPLES_DIR.exists():
        return examples

    for item in sorted(EXAMPLES_DIR.iterdir()):
        if item.is_dir() and (item / "kmpp-build.py").exists() and (item / "test.toml").exists():
            examples.append(item)

    return examples


def load_test_config(example_dir: Path) -> dict[str, Any]:
    """Load test.toml configuration."""
    with open(example_dir / "test.toml", "rb") as f:
        return tomllib.load(f)


def should_skip(config: dict[str, Any]) -> str | None:
    """Check if this test should be skipped. Returns skip reason or None."""
    skip_platforms = config.get("skip", {}).get("platforms", [])
    current_platform = platform.system().lower()
    if current_platform in [p.lower() for p in skip_platforms]:
        return f"Skipped on {current_platform}"
    return None


def run_example(example_dir: Path, tmp_path: Path) -> None:
    """Run a single example project.

    Args:
        example_dir: Path to the example directory
        tmp_path: Temporary directory for test isolation
    """
    config = load_test_config(example_dir)
    test_config = config.get("test", {})

    skip_reason = should_skip(config)
    if skip_reason:
        pytest.skip(skip_reason)

    # Copy example to temp directory (so we don't pollute the source tree)
    work_dir = tmp_path / example_dir.name
    shutil.copytree(example_dir, work_dir)
    build_dir = work_dir / "build"

    env = {
        **os.environ,
        "KMPP_BUILD_DIR": str(build_dir),
        "PYTHONPATH": os.pathsep.join(
            p for p in [str(REPO_ROOT), os.environ.get("PYTHONPATH", "")] if p
        ),
    }
    env.update(test_config.get("env", {}))

    result = subprocess.run(
        [sys.executable, str(work_dir / "kmpp-build.py")],
        cwd=work_dir,
        capture_output=True,
        text=True,
        timeout=60,
        env=env,
    )

    if result.returncode != 0:
        print(f"kmpp-build.py stdout:\n{result.stdout}")
        print(f"kmpp-build.py stderr:\n{result.stderr}")
        pytest.fail(f"kmpp-build.py failed with code {result.returncode}")

    for output in test_config.get("expected_outputs", []):
        if not (work_dir / output).exists():
            pytest.fail(f"Expected output not found: {output}")

    stdout_lines = result.stdout.splitlines()
    for line in test_config.get("expected_stdout", []):
        if line not in stdout_lines:
            print(f"kmpp-build.py stdout:\n{result.stdout}")
            pytest.fail(f"Expected line not printed: {line}")


EXAMPLES = discover_examples()


@pytest.mark.parametrize("example_dir", EXAMPLES, ids=[e.name for e in EXAMPLES])
def test_example(example_dir: Path, tmp_path: Path) -> None:
    """Run an example project."""
    run_example(example_dir, tmp_path)


def test_examples_exist() -> None:
    """Make sure at least one example is discovered."""
    assert EXAMPLES, f"no examples found in {EXAMPLES_DIR}"
