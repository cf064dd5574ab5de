from memkv.storage import DictStorage, KeyValueStorage

__version__ = "0.1.0"

__all__ = ["DictStorage", "KeyValueStorage", "__version__"]
