import pytest

from models.product import Product
from models.transaction import Transaction
from utils.stock import InsufficientStockError, apply_movement, reverse_movement


def _stored_quantity(session, product_id):
    return session.query(Product.quantity).filter(Product.id == product_id).scalar()


@pytest.fixture
def stale_session(session_factory):
    # Loaded objects keep their attribute values across commits
    session = session_factory(expire_on_commit=False)
    yield session
    session.close()


def test_out_checks_stored_quantity_not_loaded_copy(stale_session):
    product = Product(name="Widget", price=1, quantity=5, category="Hardware", sku="W-5")
    stale_session.add(product)
    stale_session.commit()

    apply_movement(stale_session, product, "out", 3)
    stale_session.commit()
    # The in-memory copy still believes there are 5 on hand
    assert product.quantity == 5

    with pytest.raises(InsufficientStockError):
        apply_movement(stale_session, product, "out", 3)
    stale_session.rollback()
    assert _stored_quantity(stale_session, product.id) == 2


def test_in_adds_to_stored_quantity(stale_session):
    product = Product(name="Widget", price=1, quantity=5, category="Hardware", sku="W-6")
    stale_session.add(product)
    stale_session.commit()

    apply_movement(stale_session, product, "in", 4)
    apply_movement(stale_session, product, "in", 1)
    stale_session.commit()
    assert _stored_quantity(stale_session, product.id) == 10


def test_reverse_reports_whether_product_exists(db_session, user):
    product = Product(name="Widget", price=1, quantity=5, category="Hardware", sku="W-7")
    db_session.add(product)
    db_session.commit()

    stocked = Transaction(product_id=product.id, user_id=user.id, type="in", quantity=2)
    assert reverse_movement(db_session, stocked) is True
    db_session.commit()
    assert _stored_quantity(db_session, product.id) == 3

    orphan = Transaction(product_id=product.id + 100, user_id=user.id, type="out", quantity=2)
    assert reverse_movement(db_session, orphan) is False
