import pytest
from unittest.mock import MagicMock

from pos_inventory.repositories import InventoryFilter
from pos_inventory.services import InventoryService
from pos_inventory.utils.exceptions import (
    InsufficientStockError, ItemNotFoundError, ItemValidationError, PersistenceError
)
from tests.conftest import create_test_inventory_item, generate_inventory_data


@pytest.fixture
def service(app):
    return InventoryService()


@pytest.fixture
def mock_repo():
    return MagicMock()


class TestItemLifecycle:
    """Create, read, update and soft delete."""

    def test_create_item(self, service, db_session):
        item = service.create_item(generate_inventory_data(name='Oat Milk', quantity=12, min_stock=4))

        assert item['id'] is not None
        assert item['name'] == 'Oat Milk'
        assert item['quantity'] == 12
        assert item['retail_price'] == 24.5
        assert item['stock_status'] == 'in_stock'

    def test_create_item_defaults(self, service, db_session):
        data = generate_inventory_data()
        del data['min_stock']
        del data['unit']

        item = service.create_item(data)

        assert item['min_stock'] == 5
        assert item['unit'] == ''

    @pytest.mark.parametrize('override,field', [
        ({'name': ''}, 'name'),
        ({'name': '   '}, 'name'),
        ({'category': ''}, 'category'),
        ({'status': 'archived'}, 'status'),
        ({'quantity': -1}, 'quantity'),
        ({'min_stock': -1}, 'min_stock'),
        ({'retail_price': -0.01}, 'retail_price'),
    ])
    def test_create_item_validation(self, mock_repo, override, field):
        service = InventoryService(repository=mock_repo)

        with pytest.raises(ItemValidationError) as exc_info:
            service.create_item(generate_inventory_data(**override))

        assert field in exc_info.value.messages
        mock_repo.create.assert_not_called()

    def test_create_item_missing_fields(self, mock_repo):
        service = InventoryService(repository=mock_repo)

        with pytest.raises(ItemValidationError) as exc_info:
            service.create_item(None)

        assert {'name', 'category', 'quantity', 'retail_price', 'status'} <= set(exc_info.value.messages)
        mock_repo.create.assert_not_called()

    def test_get_item(self, service, db_session):
        created = create_test_inventory_item(db_session, name='Butter')
        assert service.get_item(created.id)['name'] == 'Butter'

    def test_get_item_not_found(self, service, db_session):
        with pytest.raises(ItemNotFoundError):
            service.get_item(999)

    def test_update_item_replaces_all_fields(self, service, db_session):
        created = create_test_inventory_item(db_session, name='Butter', image='http://img/b.png')

        updated = service.update_item(created.id, generate_inventory_data(
            name='Salted Butter', category='Dairy', quantity=2, min_stock=3, unit='block',
            retail_price=3.25, status='inactive'
        ))

        assert updated['name'] == 'Salted Butter'
        assert updated['quantity'] == 2
        assert updated['status'] == 'inactive'
        assert updated['stock_status'] == 'low_stock'
        # Full replacement: an omitted optional field is reset
        assert updated['image'] is None

    def test_update_item_not_found(self, service, db_session):
        with pytest.raises(ItemNotFoundError):
            service.update_item(999, generate_inventory_data())

    def test_update_item_validates_before_lookup(self, mock_repo):
        service = InventoryService(repository=mock_repo)

        with pytest.raises(ItemValidationError):
            service.update_item(1, generate_inventory_data(quantity=-5))

        mock_repo.get_by_id.assert_not_called()

    def test_delete_item(self, service, db_session):
        created = create_test_inventory_item(db_session)

        assert service.delete_item(created.id) is True
        with pytest.raises(ItemNotFoundError):
            service.get_item(created.id)

    def test_delete_item_is_idempotent(self, service, db_session):
        created = create_test_inventory_item(db_session)
        service.delete_item(created.id)

        assert service.delete_item(created.id) is False


class TestStockMutation:
    """Increase and decrease."""

    def test_increase_then_decrease_to_zero(self, service, db_session):
        """quantity=10, min_stock=5: +5 gives 15, -15 gives 0 and out of stock."""
        item = create_test_inventory_item(db_session, quantity=10, min_stock=5)

        assert service.increase_stock(item.id, 5)['quantity'] == 15

        result = service.decrease_stock(item.id, 15)
        assert result['quantity'] == 0
        assert result['stock_status'] == 'out_of_stock'

    def test_low_stock_item_is_listed(self, service, db_session):
        """quantity=3, min_stock=5 is listed as low stock."""
        item = create_test_inventory_item(db_session, quantity=3, min_stock=5)

        low_stock = service.list_low_stock_items()
        items, _ = service.list_items({'stock': 'lowstock'})

        assert [entry['id'] for entry in low_stock] == [item.id]
        assert [entry['id'] for entry in items] == [item.id]
        assert items[0]['stock_status'] == 'low_stock'

    def test_decrease_beyond_stock_is_refused(self, service, db_session):
        """quantity=7, decrease by 10 fails and leaves quantity at 7."""
        item = create_test_inventory_item(db_session, quantity=7)

        with pytest.raises(InsufficientStockError) as exc_info:
            service.decrease_stock(item.id, 10)

        assert exc_info.value.available == 7
        assert exc_info.value.requested == 10
        assert 'available 7, requested 10' in str(exc_info.value)
        assert service.get_item(item.id)['quantity'] == 7

    def test_failed_decrease_leaves_state_of_first(self, service, db_session):
        item = create_test_inventory_item(db_session, quantity=10)

        service.decrease_stock(item.id, 6)
        with pytest.raises(InsufficientStockError):
            service.decrease_stock(item.id, 6)

        assert service.get_item(item.id)['quantity'] == 4

    @pytest.mark.parametrize('amount', [0, -3, True, 2.5, '4', None])
    def test_amount_must_be_positive_integer(self, mock_repo, amount):
        service = InventoryService(repository=mock_repo)

        with pytest.raises(ItemValidationError):
            service.increase_stock(1, amount)
        with pytest.raises(ItemValidationError):
            service.decrease_stock(1, amount)

        mock_repo.increase_stock.assert_not_called()
        mock_repo.decrease_stock.assert_not_called()

    def test_mutation_on_missing_item(self, service, db_session):
        with pytest.raises(ItemNotFoundError):
            service.increase_stock(999, 1)
        with pytest.raises(ItemNotFoundError):
            service.decrease_stock(999, 1)

    def test_mutation_on_deleted_item(self, service, db_session):
        item = create_test_inventory_item(db_session, quantity=10)
        service.delete_item(item.id)

        with pytest.raises(ItemNotFoundError):
            service.decrease_stock(item.id, 1)

    def test_insufficient_stock_reports_snapshot_after_guard(self, mock_repo):
        """A concurrent increase between the refused update and the read shows up as available."""
        mock_repo.decrease_stock.return_value = False
        mock_repo.get_by_id.return_value = MagicMock(quantity=10)
        service = InventoryService(repository=mock_repo)

        with pytest.raises(InsufficientStockError) as exc_info:
            service.decrease_stock(1, 6)

        assert exc_info.value.available == 10
        assert exc_info.value.requested == 6
        mock_repo.get_by_id.assert_called_once_with(1, for_update=False)

    def test_persistence_error_propagates(self, mock_repo):
        mock_repo.decrease_stock.side_effect = PersistenceError('Failed to adjust stock')
        service = InventoryService(repository=mock_repo)

        with pytest.raises(PersistenceError):
            service.decrease_stock(1, 1)


class TestListItems:

    def test_pagination_law(self, service, db_session):
        for i in range(23):
            create_test_inventory_item(db_session, name=f'Item {i:02d}')

        items, pagination = service.list_items(InventoryFilter(limit=10, page=3))

        assert len(items) == 3
        assert pagination == {'page': 3, 'limit': 10, 'total_pages': 3, 'total_items': 23}

    def test_pages_concatenate_to_full_result(self, service, db_session):
        created = [create_test_inventory_item(db_session, name=f'Item {i:02d}').id for i in range(23)]

        seen = []
        page, total_pages = 1, 1
        while page <= total_pages:
            items, pagination = service.list_items(
                InventoryFilter(sort_by='name', sort_dir='asc', page=page, limit=4)
            )
            total_pages = pagination['total_pages']
            seen.extend(item['id'] for item in items)
            page += 1

        assert total_pages == 6
        assert len(seen) == len(set(seen)) == 23
        assert sorted(seen) == sorted(created)

    def test_empty_result_has_one_page(self, service, db_session):
        items, pagination = service.list_items({'search': 'nothing here'})

        assert items == []
        assert pagination['total_pages'] == 1
        assert pagination['total_items'] == 0

    def test_raw_parameters_are_parsed(self, service, db_session):
        create_test_inventory_item(db_session, name='Apple', quantity=5)
        create_test_inventory_item(db_session, name='Banana', quantity=50)

        items, pagination = service.list_items({'min_qty': '10', 'page': '0', 'limit': '-1'})

        assert [item['name'] for item in items] == ['Banana']
        assert pagination['page'] == 1
        assert pagination['limit'] == 10

    def test_default_limit_comes_from_service(self, app, db_session):
        for i in range(4):
            create_test_inventory_item(db_session, name=f'Item {i}')

        items, pagination = InventoryService(default_limit=3).list_items({})

        assert len(items) == 3
        assert pagination['limit'] == 3
        assert pagination['total_pages'] == 2

    def test_malformed_parameters(self, service, db_session):
        with pytest.raises(ItemValidationError) as exc_info:
            service.list_items({'page': 'first'})
        assert 'page' in exc_info.value.messages


class TestAvailabilityAndSummary:

    def test_check_availability(self, service, db_session):
        item = create_test_inventory_item(db_session, quantity=4)

        assert service.check_availability(item.id, 4) == {
            'item_id': item.id,
            'available': True,
            'available_quantity': 4,
            'requested_quantity': 4
        }
        assert service.check_availability(item.id, 5)['available'] is False

    def test_check_availability_not_found(self, service, db_session):
        with pytest.raises(ItemNotFoundError):
            service.check_availability(999, 1)

    def test_get_summary(self, service, db_session):
        create_test_inventory_item(db_session, quantity=0)
        summary = service.get_summary()

        assert summary['total_products'] == 1
        assert summary['out_of_stock_products'] == 1
