from __future__ import annotations

from collections.abc import Generator

import pytest

from sqlstitch.core.config import reset_default_config


@pytest.fixture(autouse=True)
def default_config() -> Generator[None, None, None]:
    """Every test starts and ends with the stock configuration."""
    reset_default_config()
    yield
    reset_default_config()


@pytest.fixture
def quote_doubling_escaper() -> Generator[None, None, None]:
    """Install an escaper that doubles single quotes, like ``mysql_real_escape_string`` would escape them."""
    from sqlstitch import set_escaper

    set_escaper(lambda value: str(value).replace("'", "''"))
    yield
