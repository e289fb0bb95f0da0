"""Store, menu and file lookups consumed by the review services."""

from apps.core.errors import not_found_boundary
from apps.core.ids import valid_uuids

from .models import Store, Menu, File


class StoreRepository:

    def find_by_id(self, store_id) -> Store:
        """
        Fetch a store by id.

        Raises:
            NotFoundError: If the store does not exist
        """
        with not_found_boundary():
            return Store.objects.get(id=store_id)


class MenuRepository:

    def find_by_store_and_ids(self, store_id, menu_ids) -> list[Menu]:
        """Return the menus among ``menu_ids`` that belong to ``store_id``."""
        menu_ids = valid_uuids(menu_ids)
        if not menu_ids:
            return []
        return list(Menu.objects.filter(store_id=store_id, id__in=menu_ids))


class FileRepository:

    def find_by_store_and_ids(self, store_id, file_ids) -> list[File]:
        """Return the live files among ``file_ids`` linked to ``store_id``."""
        file_ids = valid_uuids(file_ids)
        if not file_ids:
            return []
        return list(
            File.objects
            .filter(store_files__store_id=store_id, id__in=file_ids, is_deleted=False)
            .distinct()
        )
