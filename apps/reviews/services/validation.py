"""Existence validators for the menus and files a review links to."""

from typing import Iterable, Optional

from apps.core.ids import canonical_id
from apps.stores.repositories import FileRepository, MenuRepository


def normalize_ids(ids: Optional[Iterable]) -> list[str]:
    """
    Deduplicate ids preserving first-seen order.

    Empty strings and ``None`` are dropped. UUID ids are compared in canonical
    form so every spelling of one UUID collapses to a single entry; other
    values are kept as given and simply never match a row.
    """
    seen = set()
    result = []
    for raw in ids or ():
        if raw is None:
            continue
        value = canonical_id(raw)
        if not value or value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


class ExistenceValidator:
    """
    Confirms that referenced menus and files exist and belong to a store.

    Returns the intersection of the requested ids with what storage holds for
    that store. The caller decides what a short result means.
    """

    def __init__(self, menus=None, files=None):
        self.menus = menus or MenuRepository()
        self.files = files or FileRepository()

    def validate_menus(self, store_id, menu_ids) -> list:
        menu_ids = normalize_ids(menu_ids)
        if not menu_ids:
            return []
        return self.menus.find_by_store_and_ids(store_id, menu_ids)

    def validate_files(self, store_id, file_ids) -> list:
        file_ids = normalize_ids(file_ids)
        if not file_ids:
            return []
        return self.files.find_by_store_and_ids(store_id, file_ids)
