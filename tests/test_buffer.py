import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from py_buffered_io import ByteBuffer


def test_read_consumes_in_order():
    buf = ByteBuffer()
    buf.append(b"hello")
    buf.append(b"world")
    assert len(buf) == 10
    assert buf.read(3) == b"hel"
    assert buf.read(4) == b"lowo"
    assert len(buf) == 3
    assert buf.read() == b"rld"
    assert not buf


def test_read_more_than_available():
    buf = ByteBuffer()
    buf.append(b"abc")
    assert buf.read(10) == b"abc"
    assert buf.read(1) == b""


def test_find_is_relative_to_cursor():
    buf = ByteBuffer()
    buf.append(b"a,b,c")
    assert buf.find(ord(",")) == 1
    buf.read(2)
    assert buf.find(ord(",")) == 1
    assert buf.find(ord(","), 2) == -1
    assert buf.find(ord(";")) == -1


def test_append_after_partial_read_keeps_unread_bytes():
    buf = ByteBuffer()
    buf.append(b"1234")
    buf.read(2)
    buf.append(b"56")
    assert buf.find(ord("5")) == 2
    assert buf.read() == b"3456"


def test_skip_and_clear():
    buf = ByteBuffer()
    buf.append(b"xyz")
    buf.skip(1)
    assert buf.read() == b"yz"
    buf.append(b"abc")
    buf.skip(10)
    assert len(buf) == 0
    buf.append(b"q")
    buf.clear()
    assert not buf
