import pytest
from uuid import uuid4

from apps.reviews.services.validation import ExistenceValidator, normalize_ids


class TestNormalizeIds:

    def test_keeps_first_seen_order(self):
        assert normalize_ids(['b', 'a', 'b', 'c', 'a']) == ['b', 'a', 'c']

    def test_drops_empty_and_none(self):
        assert normalize_ids(['', None, 'a', '  ']) == ['a']

    def test_none_input(self):
        assert normalize_ids(None) == []

    def test_uuid_and_text_collapse(self):
        value = uuid4()
        assert normalize_ids([value, str(value)]) == [str(value)]

    def test_uuid_spellings_collapse(self):
        value = uuid4()
        spellings = [str(value).upper(), value.hex, '{' + str(value) + '}', str(value)]

        assert normalize_ids(spellings) == [str(value)]

    def test_malformed_ids_kept_as_given(self):
        assert normalize_ids(['Latte', 'latte', 'Latte']) == ['Latte', 'latte']


class RecordingRepository:
    """Stands in for a menu/file repository and records every query."""

    def __init__(self, rows=()):
        self.rows = list(rows)
        self.calls = []

    def find_by_store_and_ids(self, store_id, ids):
        self.calls.append((store_id, ids))
        return [row for row in self.rows if row in ids]


class TestExistenceValidator:

    def test_empty_ids_skip_query(self):
        menus = RecordingRepository()
        files = RecordingRepository()
        validator = ExistenceValidator(menus=menus, files=files)

        assert validator.validate_menus('store', ['', None]) == []
        assert validator.validate_files('store', []) == []
        assert menus.calls == []
        assert files.calls == []

    def test_returns_intersection(self):
        menus = RecordingRepository(rows=['m1', 'm2'])
        validator = ExistenceValidator(menus=menus, files=RecordingRepository())

        assert validator.validate_menus('store', ['m1', 'm3', 'm1']) == ['m1']
        assert menus.calls == [('store', ['m1', 'm3'])]


@pytest.mark.django_db
class TestExistenceValidatorWithStorage:

    def test_menus_scoped_to_store(self, store, menu_latte, other_store_menu):
        validator = ExistenceValidator()

        found = validator.validate_menus(store.id, [str(menu_latte.id), str(other_store_menu.id)])

        assert found == [menu_latte]

    def test_files_scoped_to_store_and_live(self, store, store_photo, deleted_photo, other_store_photo):
        validator = ExistenceValidator()

        found = validator.validate_files(
            store.id,
            [str(store_photo.id), str(deleted_photo.id), str(other_store_photo.id)],
        )

        assert found == [store_photo]

    def test_malformed_ids_never_match(self, store, menu_latte):
        validator = ExistenceValidator()

        assert validator.validate_menus(store.id, ['latte', str(menu_latte.id)]) == [menu_latte]
