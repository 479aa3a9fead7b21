from decimal import Decimal

import pytest

from items_api.errors import MismatchError, NotFoundError
from items_api.repositories.item_repository import ItemRepository
from items_api.services.item_service import ItemService


@pytest.fixture
def repository():
    return ItemRepository()


@pytest.fixture
def service(repository):
    return ItemService(repository)


def _widget(service, session, name="Widget"):
    return service.create_item(session, name=name, price=Decimal("9.99"), category="tools")


class TestItemRepository:
    def test_create_assigns_increasing_ids(self, repository, session):
        first = repository.create(session, name="a", price=Decimal("1"), category="c")
        second = repository.create(session, name="b", price=Decimal("2"), category="c")
        assert first.id is not None
        assert second.id > first.id

    def test_list_is_ordered_by_id(self, repository, session):
        for name in ["z", "y", "x"]:
            repository.create(session, name=name, price=Decimal("1"), category="c")

        items = repository.list_items(session)
        assert [i.name for i in items] == ["z", "y", "x"]
        assert [i.id for i in items] == sorted(i.id for i in items)

    def test_get_missing_returns_none(self, repository, session):
        assert repository.get_by_id(session, 123) is None

    def test_replace_missing_returns_none(self, repository, session):
        assert repository.replace(session, 5, name="n", price=Decimal("1"), category="c") is None

    def test_delete_reports_absence(self, repository, session):
        item = repository.create(session, name="a", price=Decimal("1"), category="c")
        assert repository.delete(session, item.id) is True
        assert repository.delete(session, item.id) is False
        assert repository.get_by_id(session, item.id) is None


class TestItemService:
    def test_get_item_not_found(self, service, session):
        with pytest.raises(NotFoundError, match="Item 9 not found"):
            service.get_item(session, 9)

    def test_replace_overwrites(self, service, session):
        item = _widget(service, session)

        service.replace_item(
            session, item.id, name="Gear", price=Decimal("4.50"), category="parts", body_id=item.id
        )

        stored = service.get_item(session, item.id)
        assert (stored.name, stored.price, stored.category) == ("Gear", Decimal("4.50"), "parts")

    def test_replace_mismatch_checked_before_lookup(self, service, session):
        # Mismatch wins even when the path id does not exist.
        with pytest.raises(MismatchError) as excinfo:
            service.replace_item(
                session, 100, name="n", price=Decimal("1"), category="c", body_id=101
            )
        assert excinfo.value.status_code == 400
        assert excinfo.value.details == {"path_id": 100, "body_id": 101}

    def test_replace_mismatch_leaves_row(self, service, session):
        item = _widget(service, session)

        with pytest.raises(MismatchError):
            service.replace_item(
                session, item.id, name="Other", price=Decimal("1"), category="x", body_id=item.id + 1
            )

        assert service.get_item(session, item.id).name == "Widget"

    def test_replace_not_found(self, service, session):
        with pytest.raises(NotFoundError):
            service.replace_item(session, 3, name="n", price=Decimal("1"), category="c")

    def test_delete_twice(self, service, session):
        item = _widget(service, session)
        service.delete_item(session, item.id)

        with pytest.raises(NotFoundError):
            service.delete_item(session, item.id)

    def test_list_after_creates(self, service, session):
        created = [_widget(service, session, name=f"w{i}") for i in range(3)]
        assert [i.id for i in service.list_items(session)] == [i.id for i in created]


class _FakeRepository(ItemRepository):
    def __init__(self):
        self.deleted = []

    def delete(self, session, item_id):
        self.deleted.append(item_id)
        return True


def test_service_is_injected_into_routes(tmp_path):
    from items_api import create_app

    repo = _FakeRepository()
    app = create_app(
        {"TESTING": True, "DATABASE_URL": f"sqlite:///{tmp_path / 'fake.db'}"},
        item_service=ItemService(repo),
    )

    resp = app.test_client().delete("/items/12")
    assert resp.status_code == 204
    assert repo.deleted == [12]
    app.extensions["engine"].dispose()
