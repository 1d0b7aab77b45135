"""Tests for the domain and packaging configuration files."""

import tomllib
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
DOMAIN_TOML = ROOT / "src" / "bundles" / "domain.toml"


@pytest.fixture()
def domain_config():
    with DOMAIN_TOML.open("rb") as f:
        return tomllib.load(f)


class TestDomainConfig:
    def test_events_processed_in_process_by_default(self, domain_config):
        assert domain_config["event_processing"] == "sync"
        assert domain_config["command_processing"] == "sync"

    def test_production_keeps_in_process_events(self, domain_config):
        assert domain_config["production"]["event_processing"] == "sync"

    def test_production_uses_postgresql(self, domain_config):
        assert domain_config["production"]["databases"]["default"]["provider"] == "postgresql"


class TestPackaging:
    def test_readme_is_the_project_readme(self):
        with (ROOT / "pyproject.toml").open("rb") as f:
            project = tomllib.load(f)["project"]

        assert project["readme"] == "README.md"
        assert (ROOT / project["readme"]).is_file()
