import pytest

from uds.encryptor import Encryptor, evp_bytes_to_key

PASSWORD = "password"


def test_bytes_to_key_empty_password_is_md5_of_nothing():
    key, iv = evp_bytes_to_key(b"", 16, 0)
    assert key == bytes.fromhex("d41d8cd98f00b204e9800998ecf8427e")
    assert iv == b""


def test_bytes_to_key_lengths_and_prefix_stability():
    key32, iv32 = evp_bytes_to_key(PASSWORD, 32, 16)
    key16, iv16 = evp_bytes_to_key(PASSWORD, 16, 16)
    assert len(key32) == 32 and len(iv32) == 16
    assert key32[:16] == key16
    assert key32[16:] == iv16


def test_bytes_to_key_str_and_bytes_agree():
    assert evp_bytes_to_key(PASSWORD, 24, 16) == evp_bytes_to_key(PASSWORD.encode(), 24, 16)


@pytest.mark.parametrize("method", ["aes-128-cfb", "aes-256-cfb", "aes-192-ofb", "aes-256-ctr", "aes-128-cfb8"])
def test_stream_round_trip(method):
    password = PASSWORD
    enc = Encryptor(method, password)
    plain = b"upstream and downstream traffic" * 3
    cipher_text = enc.encrypt(plain)
    assert len(cipher_text) == len(plain)
    assert cipher_text != plain
    assert enc.decrypt(cipher_text) == plain


def test_each_call_is_independent():
    enc = Encryptor("aes-256-cfb", PASSWORD)
    first = enc.encrypt(b"hello")
    second = enc.encrypt(b"hello")
    assert len(first) == 5
    assert first == second
    assert first == Encryptor("aes-256-cfb", PASSWORD).encrypt(b"hello")
    assert enc.decrypt(second) == b"hello"


def test_two_instances_interoperate():
    sender = Encryptor("aes-128-cfb", PASSWORD)
    receiver = Encryptor("aes-128-cfb", PASSWORD)
    assert receiver.decrypt(sender.encrypt(b"payload")) == b"payload"


def test_empty_input_gives_empty_output():
    enc = Encryptor("aes-128-cfb", PASSWORD)
    assert enc.encrypt(b"") == b""
    assert enc.decrypt(b"") == b""


def test_cbc_encrypt_returns_whole_blocks_only():
    enc = Encryptor("aes-128-cbc", PASSWORD)
    assert len(enc.encrypt(b"x" * 20)) == 16
    assert enc.encrypt(b"x" * 10) == b""


def test_cbc_decrypt_holds_back_last_block():
    enc = Encryptor("aes-128-cbc", PASSWORD)
    plain = b"A" * 32
    cipher_text = enc.encrypt(plain)
    assert len(cipher_text) == 32
    assert enc.decrypt(cipher_text) == plain[:16]


def test_unsupported_method_raises():
    with pytest.raises(ValueError):
        Encryptor("rot13", PASSWORD)


def test_support():
    assert Encryptor.support("aes-256-cfb") is True
    assert Encryptor.support("") is False
    assert Encryptor.support("not-a-cipher") is False