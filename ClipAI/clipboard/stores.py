from ClipAI.config import config
from ClipAI.runtime import log_event, log_error

from .items import ClipKind, file_item, image_item, text_item
from .persistence import (
    FAVORITES_RECORD,
    HISTORY_RECORD,
    WORKING_SET_RECORD,
    ClipListRepository,
)

DEFAULT_HISTORY_LIMIT = 100


class ClipStore:
    """Ordered, persisted list of ClipItems with change notifications.

    Subscribers are called as ``callback(store_name, action, item)`` after
    every mutation; ``item`` is None for whole-collection actions.
    """

    name = ""

    def __init__(self, repository=None, *, base_dir=None):
        self._repo = repository if repository is not None else ClipListRepository(self.name, base_dir=base_dir)
        self._items = []
        self._subscribers = []

    @property
    def items(self):
        return tuple(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(tuple(self._items))

    def subscribe(self, callback):
        self._subscribers.append(callback)

    def get(self, item_id):
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def contains_text(self, text):
        return any(i.kind is ClipKind.TEXT and i.content == text for i in self._items)

    def load(self):
        self._items = self._repo.load()
        self._emit("loaded")
        return self.items

    def save(self):
        return self._repo.save(self._items)

    def add(self, item):
        self._items.append(item)
        self._commit("added", item)
        return item

    def remove(self, item_id):
        kept = [i for i in self._items if i.id != item_id]
        if len(kept) == len(self._items):
            return False
        self._items = kept
        self._commit("removed")
        return True

    def clear(self):
        self._items = []
        self._commit("cleared")

    def _commit(self, action, item=None):
        self.save()
        self._emit(action, item)

    def _emit(self, action, item=None):
        for cb in list(self._subscribers):
            try:
                cb(self.name, action, item)
            except Exception as e:
                log_error("store_subscriber_failed", e, store=self.name, action=action)


class FavoritesStore(ClipStore):
    name = FAVORITES_RECORD

    def keys(self):
        return {i.key for i in self._items}

    def contains(self, kind, content):
        kind = ClipKind(kind)
        return any(i.kind is kind and i.content == content for i in self._items)

    def add(self, item):
        if self.contains(item.kind, item.content):
            return None
        favored = item.copy(is_favorite=True)
        self._items.insert(0, favored)
        self._commit("added", favored)
        return favored

    def remove_key(self, kind, content):
        kind = ClipKind(kind)
        kept = [i for i in self._items if not (i.kind is kind and i.content == content)]
        if len(kept) == len(self._items):
            return False
        self._items = kept
        self._commit("removed")
        return True


class HistoryStore(ClipStore):
    """Newest-first text history, deduplicated by content and capped."""

    name = HISTORY_RECORD

    def __init__(self, repository=None, *, base_dir=None, favorites=None, limit=None):
        super().__init__(repository, base_dir=base_dir)
        self.favorites = favorites
        if limit is None:
            limit = int(getattr(config, "history_limit", DEFAULT_HISTORY_LIMIT))
        self.limit = max(1, int(limit))

    def add(self, item):
        if item.kind is ClipKind.TEXT and self.contains_text(item.content):
            return None
        if self.favorites is not None:
            item.is_favorite = self.favorites.contains(item.kind, item.content)
        self._items.insert(0, item)
        evicted = len(self._items) - self.limit
        if evicted > 0:
            del self._items[self.limit:]
            log_event("history_evicted", count=evicted)
        self._commit("added", item)
        return item

    def add_text(self, text):
        if not text:
            return None
        return self.add(text_item(text))

    def apply_favorites(self, keys):
        """Stamp each entry's flag from Favorites membership; emits only on change."""
        changed = False
        for item in self._items:
            flag = item.key in keys
            if item.is_favorite != flag:
                item.is_favorite = flag
                changed = True
        if changed:
            self._emit("favorites_synced")
        return changed


class WorkingSet(ClipStore):
    """Items being assembled for the next AI request. Only text is deduplicated."""

    name = WORKING_SET_RECORD

    def add(self, item):
        if item.kind is ClipKind.TEXT and self.contains_text(item.content):
            return None
        return super().add(item)

    def add_text(self, text):
        if not text:
            return None
        return self.add(text_item(text))

    def add_file(self, path):
        return self.add(file_item(path))

    def add_image(self, path):
        return self.add(image_item(path))

    def image_items(self):
        return [i for i in self._items if i.kind is ClipKind.IMAGE]


class ClipStores:
    """Owns the three clip collections and the rules that span them."""

    def __init__(self, *, base_dir=None, history_limit=None, history=None, favorites=None, working_set=None):
        self.favorites = favorites if favorites is not None else FavoritesStore(base_dir=base_dir)
        self.history = history if history is not None else HistoryStore(base_dir=base_dir, limit=history_limit)
        self.history.favorites = self.favorites
        self.working_set = working_set if working_set is not None else WorkingSet(base_dir=base_dir)

    def subscribe(self, callback):
        for store in (self.history, self.favorites, self.working_set):
            store.subscribe(callback)

    def load_all(self):
        self.working_set.load()
        self.history.load()
        self.favorites.load()
        self.sync_favorites()

    def sync_favorites(self):
        return self.history.apply_favorites(self.favorites.keys())

    def toggle_favorite(self, item):
        """Flip Favorites membership for the item's content; returns the new state."""
        if self.favorites.contains(item.kind, item.content):
            self.favorites.remove_key(item.kind, item.content)
            state = False
        else:
            self.favorites.add(item)
            state = True
        self.sync_favorites()
        self.favorites.save()
        self.history.save()
        log_event("favorite_toggled", kind=item.kind.value, favorite=state)
        return state

    def remove_favorite(self, item_id):
        removed = self.favorites.remove(item_id)
        if removed:
            self.sync_favorites()
            self.history.save()
        return removed
