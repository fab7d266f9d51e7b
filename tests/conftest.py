"""Shared fixtures: a temp copy of the shipped catalog and a fake npm."""

import shutil

import pytest

from regswitch.config import CATALOG_PATH
from regswitch.errors import NpmConfigError
from regswitch.registry.catalog import CatalogStore
from regswitch.registry.models import RegistryEntry

NPM_URL = "https://registry.npmjs.org/"
TAOBAO_URL = "https://registry.npmmirror.com/"
MINE_URL = "https://mine.example.com/"
OTHER_URL = "https://other.example.com/"


class FakeNpm:
    """Stands in for ``NpmConfig``; keeps the configured registry in memory."""

    def __init__(self, registry: str = NPM_URL, fail_set: bool = False, sticky: bool = False):
        self.registry = registry
        self.fail_set = fail_set
        self.sticky = sticky  # Accept set calls but keep the old value
        self.set_calls: list[str] = []

    def get_registry(self) -> str:
        return self.registry

    def set_registry(self, url: str) -> None:
        self.set_calls.append(url)
        if self.fail_set:
            raise NpmConfigError("npm config set failed", returncode=1)
        if not self.sticky:
            self.registry = url


class BrokenNpm:
    def get_registry(self) -> str:
        raise NpmConfigError("npm: command not found")

    def set_registry(self, url: str) -> None:
        raise NpmConfigError("npm: command not found")


@pytest.fixture
def catalog_path(tmp_path):
    """A writable copy of the shipped catalog."""
    path = tmp_path / "registries.json"
    shutil.copyfile(CATALOG_PATH, path)
    return path


@pytest.fixture
def custom_catalog_path(catalog_path):
    """The shipped catalog plus two custom entries."""
    store = CatalogStore(catalog_path)
    catalog = store.load()
    catalog.add("mine", RegistryEntry.from_url(MINE_URL))
    catalog.add("other", RegistryEntry.from_url(OTHER_URL))
    store.save(catalog)
    return catalog_path
