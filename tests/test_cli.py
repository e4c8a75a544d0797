from models import db
from models.cart import Cart
from models.product import Product


def test_seed_catalog_loads_demo_products(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed-catalog', '--yes'])
    assert result.exit_code == 0, result.output
    assert 'Seeded 10 products.' in result.output
    assert Product.query.count() == 10
    default = app.config['DEFAULT_SESSION_ID']
    assert Cart.query.filter_by(session_id=default).one() is not None


def test_seed_catalog_wipes_existing_rows(app, make_product):
    make_product('Leftover', '1.00')
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed-catalog', '--yes'])
    assert result.exit_code == 0, result.output
    names = [p.name for p in db.session.query(Product).all()]
    assert 'Leftover' not in names
    assert 'iPhone 15 Pro' in names


def test_seed_catalog_refused_in_production(app, monkeypatch, make_product):
    make_product('Keep me', '1.00')
    monkeypatch.setenv('APP_ENV', 'production')
    monkeypatch.setitem(app.config, 'ALLOW_DESTRUCTIVE_SEED', False)
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed-catalog', '--yes'])
    assert result.exit_code != 0
    assert 'Refusing' in result.output
    assert Product.query.count() == 1


def test_seed_catalog_requires_confirmation(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed-catalog'], input='n\n')
    assert result.exit_code != 0
    assert Product.query.count() == 0
