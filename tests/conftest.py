from pathlib import Path

import pytest

from ocenv.models import Environment, resolve_credentials


@pytest.fixture
def make_env(tmp_path: Path):
    """Build an Environment rooted under tmp_path."""

    def _make(alias: str = "test", **options) -> Environment:
        credentials = resolve_credentials(
            cluster_id=options.pop("cluster_id", None),
            username=options.pop("username", None),
            password=options.pop("password", None),
            url=options.pop("url", None),
        )
        return Environment(alias=alias, path=tmp_path / alias, credentials=credentials, **options)

    return _make
