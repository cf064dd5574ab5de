"""Walk a store through set, query and delete and print what happens."""

from memkv.storage.kv import DictStorage

RULE_WIDTH = 50


def section(title: str) -> None:
    print(f"\n{title}")
    print("-" * RULE_WIDTH)


def run_demo(store: DictStorage | None = None) -> DictStorage:
    store = store if store is not None else DictStorage()

    print("In-Memory Key-Value Store Demo")
    print("=" * RULE_WIDTH)

    section("Example 1: Basic Operations")
    name, city = "Alice", "Seattle"
    print(f"Setting: name = {name}, city = {city}")
    store.set("name", name)
    store.set("city", city)

    if (stored_name := store.query("name")) is not None:
        print(f"Retrieved name: {stored_name}")
    if (stored_city := store.query("city")) is not None:
        print(f"Retrieved city: {stored_city}")

    print(f"Store size: {store.size()}")

    section("Example 2: Updating Values")
    store.set("city", "Portland")
    print(f"Updated city to: {store.query('city')}")

    section("Example 3: Deleting Values")
    if (deleted_city := store.delete("city")) is not None:
        # The store no longer holds the value; it is ours to keep
        print(f"Deleted city: {deleted_city}")
        print(f"Deleted value length: {len(deleted_city)}")

    print(f"City after delete: {store.query('city')}")
    print(f"Store size: {store.size()}")

    section("Example 4: Multiple Entries")
    store.set("language", "Python")
    store.set("year", "2026")
    store.set("level", "Senior")
    print(f"Store now contains {store.size()} entries")

    section("Example 5: Repeated Reads")
    generation = store.generation
    print(f"Read 1: {store.query('language')}")
    print(f"Read 2: {store.query('language')}")
    print(f"Reads left the store untouched: {store.generation == generation}")

    store.set("language", "Python 3.12")
    print(f"Updated language: {store.query('language')}")

    section("Example 6: Missing Keys")
    match store.query("missing_key"):
        case None:
            print("Key 'missing_key' not found (returns None)")
        case value:
            print(f"Found: {value}")

    print(f"Deleting nonexistent key returns: {store.delete('nonexistent')}")

    section("Final Store State")
    print(f"Total entries: {store.size()}")
    print(f"Is empty? {store.is_empty()}")
    print("=" * RULE_WIDTH)

    return store


def main() -> None:
    run_demo()


if __name__ == "__main__":
    main()
