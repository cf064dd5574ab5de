from memkv.storage.guarded import AsyncLockedStorage, LockedStorage
from memkv.storage.kv import DictStorage, KeyValueStorage

__all__ = ["AsyncLockedStorage", "DictStorage", "KeyValueStorage", "LockedStorage"]
