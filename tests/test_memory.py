import pytest

from nescore.memory import DefaultMemory, Memory


def test_default_size():
    mem = DefaultMemory()
    assert len(mem.main_memory()) == DefaultMemory.MEMORY_SIZE + 1
    assert set(mem.main_memory()) == {0}


def test_set_get_roundtrip():
    mem = DefaultMemory()
    mem.set(0x1234, 0xAB)
    mem.set_force(0x2000, 0x7F)
    assert mem.get(0x1234) == 0xAB
    assert mem.get_direct(0x1234) == 0xAB
    assert mem.get(0x2000) == 0x7F


def test_word_little_endian():
    mem = DefaultMemory()
    mem.set(0x10, 0x34)
    mem.set(0x11, 0x12)
    assert mem.word(0x10) == 0x1234


def test_word_ind_y_wraps_in_zero_page():
    mem = DefaultMemory()
    mem.set(0xFF, 0x34)
    mem.set(0x00, 0x12)
    mem.set(0x100, 0x56)
    assert mem.word_ind_y(0xFF, True) == 0x1234
    assert mem.word_ind_y(0xFF, False) == 0x5634
    assert mem.word(0xFF) == mem.word_ind_y(0xFF, False)


def test_word_wraps_at_end_of_address_space():
    mem = DefaultMemory()
    mem.set(0xFFFF, 0x01)
    mem.set(0x0000, 0x02)
    assert mem.word(0xFFFF) == mem.word_ind_y(0xFFFF, True)
    assert mem.word(0xFFFF) >> 8 == mem.get(0x0000)


def test_main_memory_is_a_copy():
    mem = DefaultMemory()
    snapshot = bytearray(mem.main_memory())
    snapshot[5] = 9
    assert mem.get(5) == 0


def test_invalid_byte_value_rejected():
    mem = DefaultMemory()
    with pytest.raises(ValueError):
        mem.set(0, 256)


def test_from_file(tmp_path):
    path = tmp_path / "prog.bin"
    path.write_bytes(bytes([0xA9, 0x01, 0x00, 0xFF]))
    mem = DefaultMemory.from_file(path)
    image = mem.main_memory()
    assert len(image) == DefaultMemory.MEMORY_SIZE
    assert image[:4] == bytes([0xA9, 0x01, 0x00, 0xFF])
    assert set(image[4:]) == {0}


def test_from_file_truncates(tmp_path):
    path = tmp_path / "big.bin"
    path.write_bytes(bytes([7]) * (DefaultMemory.MEMORY_SIZE + 10))
    mem = DefaultMemory.from_file(path)
    assert len(mem.main_memory()) == DefaultMemory.MEMORY_SIZE


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DefaultMemory.from_file(tmp_path / "missing.bin")


def test_memory_is_abstract():
    with pytest.raises(TypeError):
        Memory()