from .items import ClipItem, ClipKind, file_item, image_item, text_item
from .persistence import ClipListRepository, JsonRecordStore
from .stores import ClipStores, FavoritesStore, HistoryStore, WorkingSet
from .monitor import ClipboardMonitor
