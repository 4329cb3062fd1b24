"""`--stress` unskips tests marked `@pytest.mark.stress`: long repeated thread races that are too slow for every run."""
import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--stress",
        action="store_true",
        default=False,
        help="Run long thread-race stress tests",
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--stress"):
        skipper = pytest.mark.skip(reason="Only run when --stress is given")
        for item in items:
            if "stress" in item.keywords:
                item.add_marker(skipper)
