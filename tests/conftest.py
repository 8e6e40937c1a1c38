"""
Pytest configuration for the plengi-installer test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Isolation from user configuration files
- Fixtures building temporary Xcode-style project trees
"""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

from plengi_installer.cli.config import CLIConfig
from plengi_installer.logging_config import setup_logging

from swift_samples import APP_DELEGATE, CONTENT_VIEW, SWIFTUI_APP, SWIFTUI_APP_WITH_INIT, make_project


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for machine-mode operation."""
    os.environ.setdefault("PLENGI_MACHINE_MODE", "1")


@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)
    CLIConfig.reset()
    yield
    CLIConfig.reset()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    """Keep ~/.config/plengi and PLENGI_CONFIG from leaking into tests."""
    monkeypatch.setenv("HOME", str(tmp_path_factory.mktemp("home")))
    monkeypatch.delenv("PLENGI_CONFIG", raising=False)
    monkeypatch.delenv("PLENGI_HUMAN_MODE", raising=False)


# ============================================================================
# PROJECT FIXTURES
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="plengi_test_"))
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def delegate_project(temp_dir):
    """UIKit project with Weather/AppDelegate.swift."""
    return make_project(temp_dir, {
        "Weather/AppDelegate.swift": APP_DELEGATE,
        "Weather/ContentView.swift": CONTENT_VIEW,
    })


@pytest.fixture
def swiftui_project(temp_dir):
    """SwiftUI project whose @main App struct has no init()."""
    return make_project(temp_dir, {
        "Weather/WeatherApp.swift": SWIFTUI_APP,
        "Weather/ContentView.swift": CONTENT_VIEW,
    })


@pytest.fixture
def swiftui_init_project(temp_dir):
    """SwiftUI project whose @main App struct already has an init()."""
    return make_project(temp_dir, {
        "Weather/WeatherApp.swift": SWIFTUI_APP_WITH_INIT,
        "Weather/ContentView.swift": CONTENT_VIEW,
    })
