"""Pytest configuration and fixtures for adstxt tests."""

from pathlib import Path

import pytest

from adstxt.parser.ads_txt import AdsTxtParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def parser():
    """A fresh parser per test."""
    return AdsTxtParser()


@pytest.fixture
def mixed_ads_txt_path():
    """Path to an ads.txt file mixing valid, commented and broken lines."""
    return FIXTURES_DIR / "ads_mixed.txt"


@pytest.fixture
def mixed_ads_txt(mixed_ads_txt_path):
    return mixed_ads_txt_path.read_text()


@pytest.fixture
def sample_ads_txt():
    """Example file from the IAB ads.txt v1.0.2 specification."""
    return """# Ads.txt file for example.com:
greenadexchange.com, 12345, DIRECT, d75815a79
blueadexchange.com, XF436, DIRECT
contact=adops@example.com
contact=http://example.com/contact-us
subdomain=divisionone.example.com
"""


@pytest.fixture
def config_dir(tmp_path):
    """Empty config directory for ConfigManager / CLI tests."""
    path = tmp_path / "adstxt-config"
    path.mkdir()
    return path
