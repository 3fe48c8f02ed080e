"""Category repository over a key-value store."""

from tally.domain.models import CategoryName
from tally.logging_setup import get_logger
from tally.store.schema import CATEGORIES_KEY, DEFAULT_CATEGORIES
from tally.store.storage import KeyValueStore, read_collection, write_collection

logger = get_logger(__name__)


class CategoryRepository:
    """The user's category list.

    Until something is written, the list reads as the default categories.
    Deleting a category never touches transactions that use it.
    """

    def __init__(self, store: KeyValueStore | None) -> None:
        self.store = store

    def list_all(self) -> list[CategoryName]:
        """Current categories in stored order."""
        return [CategoryName(name) for name in read_collection(self.store, CATEGORIES_KEY, list(DEFAULT_CATEGORIES))]

    def add(self, name: str) -> bool:
        """Append a category unless an identical name already exists.

        Args:
            name: Category name (case-sensitive).

        Returns:
            True if added, False if it was already present.
        """
        categories = self.list_all()
        if name in categories:
            logger.debug("Category %r already exists", name)
            return False

        categories.append(CategoryName(name))
        write_collection(self.store, CATEGORIES_KEY, categories)
        return True

    def delete(self, name: str) -> bool:
        """Remove every entry equal to name.

        Returns:
            True if anything was removed.
        """
        categories = self.list_all()
        remaining = [cat for cat in categories if cat != name]
        if len(remaining) == len(categories):
            logger.debug("Delete skipped, no category %r", name)
            return False

        write_collection(self.store, CATEGORIES_KEY, remaining)
        return True
