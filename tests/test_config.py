"""Tests for configuration selection via APP_ENV."""
import importlib

import pytest


@pytest.fixture()
def config_module(monkeypatch):
    import app.config as config
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_testing_config_uses_memory_db(monkeypatch, config_module):
    monkeypatch.setenv('APP_ENV', 'testing')
    monkeypatch.delenv('TEST_DATABASE_URL', raising=False)
    cfg = config_module().get_config_class()
    assert cfg.TESTING is True
    assert cfg.SQLALCHEMY_DATABASE_URI.startswith('sqlite://')
    assert cfg.SEED_ON_STARTUP is False


def test_development_defaults(monkeypatch, config_module):
    monkeypatch.setenv('APP_ENV', 'development')
    monkeypatch.delenv('DATABASE_URL', raising=False)
    monkeypatch.delenv('SEED_ON_STARTUP', raising=False)
    cfg = config_module().get_config_class()
    assert cfg.DEBUG is True
    assert cfg.SQLALCHEMY_DATABASE_URI == 'sqlite:///dev.db'
    assert cfg.SEED_ON_STARTUP is True
    assert cfg.CHECKOUT_LIMIT_PER_IP == '20 per hour'


def test_production_requires_secrets(monkeypatch, config_module):
    monkeypatch.setenv('APP_ENV', 'production')
    monkeypatch.delenv('SECRET_KEY', raising=False)
    monkeypatch.delenv('DATABASE_URL', raising=False)
    with pytest.raises(RuntimeError, match='SECRET_KEY'):
        config_module().get_config_class()


def test_production_refuses_startup_reseed(monkeypatch, config_module):
    monkeypatch.setenv('APP_ENV', 'production')
    monkeypatch.setenv('SECRET_KEY', 's3cret')
    monkeypatch.setenv('DATABASE_URL', 'postgresql://shop@db/shop')
    monkeypatch.setenv('SEED_ON_STARTUP', 'true')
    monkeypatch.delenv('ALLOW_DESTRUCTIVE_SEED', raising=False)
    with pytest.raises(RuntimeError, match='ALLOW_DESTRUCTIVE_SEED'):
        config_module().get_config_class()


def test_production_config(monkeypatch, config_module):
    monkeypatch.setenv('APP_ENV', 'production')
    monkeypatch.setenv('SECRET_KEY', 's3cret')
    monkeypatch.setenv('DATABASE_URL', 'postgresql://shop@db/shop')
    monkeypatch.delenv('SEED_ON_STARTUP', raising=False)
    cfg = config_module().get_config_class()
    assert cfg.DEBUG is False
    assert cfg.SEED_ON_STARTUP is False
    assert cfg.SQLALCHEMY_DATABASE_URI == 'postgresql://shop@db/shop'
