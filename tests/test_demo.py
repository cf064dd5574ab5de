from memkv.demo.main import run_demo
from memkv.storage.kv import DictStorage


def test_demo_final_state(capsys) -> None:
    store = run_demo()
    out = capsys.readouterr().out

    assert store.size() == 4
    assert store.query("name") == "Alice"
    assert store.query("city") is None
    assert store.query("language") == "Python 3.12"

    assert "Deleted city: Portland" in out
    assert "Deleted value length: 8" in out
    assert "Reads left the store untouched: True" in out
    assert "Key 'missing_key' not found (returns None)" in out
    assert "Deleting nonexistent key returns: None" in out
    assert "Is empty? False" in out


def test_demo_uses_given_store(capsys) -> None:
    store = DictStorage()
    store.set("extra", "x")

    assert run_demo(store) is store
    assert store.size() == 5
