"""Tests for resolving and switching the active registry."""

import shutil

import pytest

from regswitch.errors import NpmConfigError
from regswitch.npm_config import NpmConfig
from regswitch.registry.catalog import Catalog, CatalogStore
from regswitch.registry.models import ActiveRegistry, RegistryEntry
from regswitch.resolver import resolve
from regswitch.switch import is_switch_successful, switch_registry

from conftest import NPM_URL, TAOBAO_URL, BrokenNpm, FakeNpm


# --- Resolver ---


def test_resolve_matches_catalog_entry():
    catalog = Catalog({"npm": RegistryEntry.from_url("https://registry.npmjs.org")})
    npm = FakeNpm("https://registry.npmjs.org")

    assert resolve(catalog, npm) == ActiveRegistry(name="npm", registry="https://registry.npmjs.org")


def test_resolve_unlisted_url():
    catalog = Catalog({"npm": RegistryEntry.from_url("https://registry.npmjs.org")})
    npm = FakeNpm("https://unlisted.example.com/")

    current = resolve(catalog, npm)
    assert current.name == ""
    assert current.registry == "https://unlisted.example.com/"
    assert not current.in_catalog


def test_resolve_trims_whitespace():
    catalog = Catalog({"npm": RegistryEntry.from_url(NPM_URL)})
    assert resolve(catalog, FakeNpm(f"  {NPM_URL}\n")).name == "npm"


def test_resolve_propagates_npm_failure():
    with pytest.raises(NpmConfigError):
        resolve(Catalog(), BrokenNpm())


# --- Switch ---


def test_switch_to_taobao(catalog_path):
    catalog = CatalogStore(catalog_path).load()
    npm = FakeNpm(NPM_URL)
    current = resolve(catalog, npm)

    result = switch_registry(catalog, npm, current, selection="taobao")

    assert npm.set_calls == [TAOBAO_URL]
    assert result.success
    assert result.current.name == "taobao"


def test_switch_back_to_default(catalog_path):
    catalog = CatalogStore(catalog_path).load()
    npm = FakeNpm(TAOBAO_URL)
    current = resolve(catalog, npm)

    result = switch_registry(catalog, npm, current, selection="npm")

    assert result.success
    assert result.current.name == "npm"


def test_switch_fails_when_npm_keeps_old_value(catalog_path):
    catalog = CatalogStore(catalog_path).load()
    npm = FakeNpm(TAOBAO_URL, sticky=True)
    current = resolve(catalog, npm)

    result = switch_registry(catalog, npm, current, selection="yarn")

    assert not result.success
    assert result.current.name == "taobao"
    assert "still" in result.error


def test_switch_fails_when_set_command_fails(catalog_path):
    catalog = CatalogStore(catalog_path).load()
    npm = FakeNpm(NPM_URL, fail_set=True)
    current = resolve(catalog, npm)

    result = switch_registry(catalog, npm, current, selection="taobao")

    assert not result.success
    assert result.current is None
    assert "npm config set failed" in result.error


def test_switch_to_explicit_url(catalog_path):
    catalog = CatalogStore(catalog_path).load()
    catalog.add("mine", RegistryEntry.from_url("https://mine.example.com/"))
    npm = FakeNpm("https://mine.example.com/")
    current = resolve(catalog, npm)

    result = switch_registry(catalog, npm, current, url="https://new.example.com/")

    assert npm.set_calls == ["https://new.example.com/"]
    assert result.success
    assert result.current == ActiveRegistry(name="", registry="https://new.example.com/")


def test_success_condition_is_asymmetric():
    npm_entry = ActiveRegistry(name="npm", registry=NPM_URL)
    taobao = ActiveRegistry(name="taobao", registry=TAOBAO_URL)
    unlisted = ActiveRegistry(name="", registry="https://x.example.com/")

    # Landing on the default registry only counts when it was asked for
    assert is_switch_successful(taobao, npm_entry, "npm")
    assert not is_switch_successful(taobao, npm_entry, "yarn")
    assert not is_switch_successful(npm_entry, npm_entry, "")

    # Otherwise the name just has to change
    assert is_switch_successful(npm_entry, taobao, "taobao")
    assert not is_switch_successful(taobao, taobao, "taobao")
    assert is_switch_successful(taobao, unlisted, "")
    assert not is_switch_successful(unlisted, unlisted, "")


# --- npm wrapper ---


def test_npm_config_missing_executable():
    npm = NpmConfig(command="regswitch-no-such-npm")
    with pytest.raises(NpmConfigError):
        npm.get_registry()


def test_npm_config_non_zero_exit():
    npm = NpmConfig(command="false")
    with pytest.raises(NpmConfigError) as exc:
        npm.set_registry(NPM_URL)
    assert exc.value.returncode == 1


def test_npm_config_reads_trimmed_stdout():
    # `echo get registry` prints its arguments back
    assert NpmConfig(command="echo").get_registry() == "get registry"


def test_npm_config_resolves_executable_on_path(monkeypatch):
    echo = shutil.which("echo")
    monkeypatch.setattr(shutil, "which", lambda command: echo if command == "npm" else None)

    npm = NpmConfig(command="npm")
    assert npm.executable() == echo
    assert npm.get_registry() == "get registry"


def test_npm_config_falls_back_to_bare_command(monkeypatch):
    monkeypatch.setattr(shutil, "which", lambda command: None)
    assert NpmConfig(command="npm").executable() == "npm"
