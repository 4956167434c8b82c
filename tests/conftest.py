"""
Pytest configuration and shared fixtures.

Provides pipeline settings and temporary log trees for unit and integration tests.
"""

import pytest
from pathlib import Path
from typing import Callable, Dict

from actionlog.core.config import PipelineSettings


VALID_LINE = (
    "2024 May 28 14:12:01 : firewall INFO[55555555]: TCP connection initiated.  "
    "src=192.100.1.200 dst=192.100.2.244 proto=tcp srcport=88888 dstport=77777 "
    "interface=bnd1 dir=inbound action=accept rule=123 time=2024-05-28T14:12:01"
)

OTHER_LINE = "src=192.168.1.1 dst=192.168.1.2 interface=eth0 dir=outbound action=reject rule=999"

MALFORMED_LINE = "2024 May 28 14:12:05 : firewall WARN: dst=10.0.0.2 interface=eth1 action=drop"

NOISE_LINE = "2024 May 28 14:12:02 : firewall INFO: heartbeat ok"


@pytest.fixture
def sample_lines() -> Dict[str, str]:
    """
    Fixture providing representative firewall log lines.
    
    Returns:
        Dict with keys:
            - valid: full line with all six fields plus unknown fields
            - other: a second, distinct valid line
            - malformed: candidate line missing src, dir and rule
            - noise: line without an action field
    """
    return {
        "valid": VALID_LINE,
        "other": OTHER_LINE,
        "malformed": MALFORMED_LINE,
        "noise": NOISE_LINE,
    }


@pytest.fixture
def pipeline_settings() -> PipelineSettings:
    """
    Fixture providing pipeline settings independent of environment overrides.
    
    Returns:
        PipelineSettings: Small queue so producer back-pressure is exercised
    """
    return PipelineSettings(
        workers=2,
        path_queue_size=2,
        encoding="utf-8",
        encoding_errors="replace",
        max_line_length=64 * 1024,
    )


@pytest.fixture
def make_log_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Fixture returning a factory that builds a log directory.
    
    The factory takes a mapping of relative path -> file content and
    returns the root directory.
    """
    root = tmp_path / "logs"
    root.mkdir()

    def _make(files: Dict[str, str]) -> Path:
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


def pytest_configure(config):
    """
    Pytest hook for custom configuration.
    
    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (deferred CI)"
    )
