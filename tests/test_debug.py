import sys

from chaintable import debug
from chaintable.debug import dump_table
from chaintable.hashing import hash_identity
from chaintable.table import HashTable, set_debug_trace_resize


def test_dump_table(capsys):
    t = HashTable(4, 1.0, hash_fn=hash_identity)
    t.put(1, "a")
    t.put(5, "b")

    dump_table(t, "table")

    out = capsys.readouterr().out
    assert out == (
        "== table ==\n"
        "size=2 capacity=4 load_factor=1.00\n"
        "0000 -\n"
        "0001 1='a' 5='b'\n"
        "0002 -\n"
        "0003 -\n"
    )


def test_dump_table_braces_in_values(capsys):
    t = HashTable(1, 1.0)
    t.put(0, "{}")

    dump_table(t, "braces")

    assert "0='{}'" in capsys.readouterr().out


def test_trace_resize(capfd, monkeypatch):
    monkeypatch.setattr(debug, "stderr", sys.stderr)
    set_debug_trace_resize(True)
    try:
        t = HashTable(4, 0.75, hash_fn=hash_identity)
        t.put(1, "a")
        t.put(2, "b")
        t.put(3, "c")
    finally:
        set_debug_trace_resize(False)

    out, err = capfd.readouterr()
    assert err == "resize 4 -> 8 (3 keys)\n"
    assert out == (
        "== resize ==\n"
        "size=3 capacity=8 load_factor=0.75\n"
        "0000 -\n"
        "0001 1='a'\n"
        "0002 2='b'\n"
        "0003 3='c'\n"
        "0004 -\n"
        "0005 -\n"
        "0006 -\n"
        "0007 -\n"
    )


def test_trace_resize_disabled(capfd, monkeypatch):
    monkeypatch.setattr(debug, "stderr", sys.stderr)
    t = HashTable(1, 1.0)
    t.put(1, "a")
    assert t.capacity() == 2

    out, err = capfd.readouterr()
    assert out == ""
    assert err == ""
