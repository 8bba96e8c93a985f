import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from siacentral.config import ClientConfig  # noqa: E402


@pytest.fixture
def config():
    return ClientConfig(base_url="https://api.test/v2", timeout=5.0, api_key=None)
